from app.application import templates
from app.application.dispatcher import ConfirmationDispatcher, RenderedEmail
from app.domain.entities import Attachment, ContactInquiry

USER_SUBJECT = "We received your message - AstroSharma"


async def submit_contact(
    dispatcher: ConfirmationDispatcher,
    inquiry: ContactInquiry,
    attachment: Attachment | None = None,
    year: int | None = None,
) -> None:
    admin = RenderedEmail(
        subject=f"New Contact Inquiry: {inquiry.full_name}",
        html=templates.render_email(
            "New Contact Inquiry",
            templates.contact_admin_message(),
            templates.contact_details(inquiry, for_admin=True),
            year=year,
        ),
    )
    user = RenderedEmail(
        subject=USER_SUBJECT,
        html=templates.render_email(
            f"Namaste {inquiry.first_name}",
            templates.contact_user_message(),
            templates.contact_details(inquiry, for_admin=False),
            year=year,
        ),
    )
    await dispatcher.dispatch(
        user_email=inquiry.email, admin=admin, user=user, attachment=attachment
    )
