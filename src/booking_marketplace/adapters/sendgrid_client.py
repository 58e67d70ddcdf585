"""SendGrid email API client."""

from dataclasses import dataclass, field

import httpx

from booking_marketplace.domain.errors import EmailDeliveryError
from booking_marketplace.services.notifications import EmailSender


@dataclass
class HttpxSendGridClient(EmailSender):
    """Email sender backed by SendGrid dynamic templates."""

    api_key: str
    from_email: str
    http_client: httpx.AsyncClient
    base_url: str = "https://api.sendgrid.com/v3"
    template_ids: dict[str, str] = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        api_key: str,
        from_email: str,
        base_url: str = "https://api.sendgrid.com/v3",
        template_ids: dict[str, str] | None = None,
    ) -> "HttpxSendGridClient":
        """Create a SendGrid client with a managed httpx session."""
        return cls(
            api_key=api_key,
            from_email=from_email,
            http_client=httpx.AsyncClient(),
            base_url=base_url,
            template_ids=template_ids or {},
        )

    async def send(
        self,
        to_email: str,
        subject: str,
        template_id: str,
        data: dict[str, object],
    ) -> None:
        """Send a templated message through SendGrid's mail/send API."""
        url = f"{self.base_url}/mail/send"
        payload: dict[str, object] = {
            "personalizations": [
                {
                    "to": [{"email": to_email}],
                    "dynamic_template_data": data,
                }
            ],
            "from": {"email": self.from_email},
            "subject": subject,
            "template_id": self.template_ids.get(template_id, template_id),
        }
        try:
            response = await self.http_client.post(
                url,
                json=payload,
                headers={"Authorization": f"Bearer {self.api_key}"},
                timeout=10,
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise EmailDeliveryError(
                f"SendGrid rejected '{template_id}' email to {to_email}"
            ) from exc

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.http_client.aclose()
