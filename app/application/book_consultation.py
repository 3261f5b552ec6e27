from app.application import templates
from app.application.dispatcher import ConfirmationDispatcher, RenderedEmail
from app.domain.entities import Attachment, Consultation, MatchConsultation

USER_SUBJECT = "Divine Journey Begins - Booking Received"


def admin_subject(submission: Consultation) -> str:
    if isinstance(submission, MatchConsultation):
        who = "Marriage Match"
    else:
        who = submission.full_name or "Unnamed client"
    return f"New Application: {who} - {submission.consultation_type}"


async def book_consultation(
    dispatcher: ConfirmationDispatcher,
    submission: Consultation,
    attachment: Attachment | None = None,
    year: int | None = None,
) -> None:
    admin = RenderedEmail(
        subject=admin_subject(submission),
        html=templates.render_email(
            "New Booking Received",
            templates.booking_admin_message(),
            templates.consultation_details(submission, for_admin=True),
            year=year,
        ),
    )
    user = RenderedEmail(
        subject=USER_SUBJECT,
        html=templates.render_email(
            "Booking Confirmation",
            templates.booking_user_message(submission),
            templates.consultation_details(submission, for_admin=False),
            year=year,
        ),
    )
    await dispatcher.dispatch(
        user_email=submission.email, admin=admin, user=user, attachment=attachment
    )
