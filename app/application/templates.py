"""
HTML email bodies.

Every document inlines its own stylesheet and points at the logo through
``cid:logo``; the dispatcher attaches the logo under that same content-id.
User supplied values go through ``html.escape`` before they reach markup.
"""

from __future__ import annotations

from datetime import datetime
from html import escape

from app.domain.entities import (
    Consultation,
    ContactInquiry,
    MatchConsultation,
    Profile,
    StandardConsultation,
)
from app.domain.services import format_time

LOGO_CID = "logo"

STYLE = """
        body { font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; background-color: #f4f4f4; margin: 0; padding: 0; }
        .wrapper { padding: 40px 20px; background-color: #f4f4f4; min-height: 100vh; }
        .container { max-width: 600px; margin: 0 auto; background-color: #ffffff; border-radius: 12px; box-shadow: 0 4px 20px rgba(0,0,0,0.08); overflow: hidden; }
        .header { padding: 40px 0 20px; text-align: center; }
        .logo-img { width: 80px; height: 80px; object-fit: cover; border-radius: 50%; box-shadow: 0 4px 10px rgba(0,0,0,0.1); }
        .content { padding: 0 40px 40px; text-align: center; }
        .title { color: #6441A5; font-size: 26px; margin-bottom: 20px; font-weight: 700; }
        .message { color: #4a5568; line-height: 1.6; font-size: 16px; margin-bottom: 30px; text-align: left; }
        .details-box { background-color: #faf5ff; border: 1px solid #e9d8fd; border-radius: 12px; padding: 20px; margin: 30px 0; }
        .details-table { width: 100%; border-collapse: collapse; text-align: left; }
        .details-table th { color: #6b46c1; font-size: 12px; font-weight: 700; text-transform: uppercase; padding: 8px 0; width: 40%; vertical-align: top; }
        .details-table td { color: #2d3748; font-size: 15px; font-weight: 500; padding: 8px 0; vertical-align: top; }
        .footer { background-color: #fbfbfb; padding: 20px; text-align: center; font-size: 12px; color: #a0aec0; border-top: 1px solid #edf2f7; }
        .highlight { color: #805ad5; font-weight: 700; }
"""

SECTION_STYLE = "border-top:1px solid #ddd; padding-top:10px; font-weight:bold;"


def _e(value: str | None) -> str:
    return escape(value or "")


def render_email(
    title: str, message_html: str, details_html: str, year: int | None = None
) -> str:
    """Wrap a message and a details fragment into a full HTML document.

    ``title`` is escaped; ``message_html`` and ``details_html`` are trusted
    fragments built by the functions below.
    """
    year = year or datetime.now().year
    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <style>{STYLE}    </style>
</head>
<body>
    <div class="wrapper">
        <div class="container">
            <div class="header">
                <img src="cid:{LOGO_CID}" alt="AstroSharma" class="logo-img">
            </div>
            <div class="content">
                <h1 class="title">{_e(title)}</h1>
                <div class="message">{message_html}</div>
                {details_html}
            </div>
            <div class="footer">
                &copy; {year} Astro Services. All rights reserved.
            </div>
        </div>
    </div>
</body>
</html>
"""


def _th_row(label: str, value_html: str, td_attrs: str = "") -> str:
    return f"<tr><th>{label}</th><td{td_attrs}>{value_html}</td></tr>"


def _profile_values(p: Profile) -> tuple[tuple[str, str], ...]:
    return (
        ("Name", p.name),
        ("DOB", p.dob),
        ("Time", format_time(p.time)),
        ("Place", p.place),
        ("Pincode", p.pincode),
    )


def _partial_profile_rows(title: str, p: Profile) -> list[str]:
    rows = [f'<tr><th colspan="2" style="{SECTION_STYLE}">{title}</th></tr>']
    rows.extend(_th_row(label, _e(value)) for label, value in _profile_values(p) if value)
    return rows


def _standard_details(s: StandardConsultation, for_admin: bool) -> str:
    rows: list[str] = []
    if for_admin:
        rows.append(_th_row("Client Name", _e(s.full_name)))
    rows.append(_th_row("Service", _e(s.consultation_type), ' class="highlight"'))
    if for_admin:
        rows.append(_th_row("Payment", _e(s.price), ' class="highlight"'))
        rows.append(_th_row("Phone", _e(s.phone)))
        rows.append(_th_row("Email", _e(s.email)))

    optional = (
        ("DOB", s.dob),
        ("Time", format_time(s.birth_time)),
        ("Place", s.birth_place),
        ("Pincode", s.pincode),
        ("Start Date", s.start_date),
        ("End Date", s.end_date),
        ("Muhurtham Place", s.muhurtham_location),
    )
    rows.extend(_th_row(label, _e(value)) for label, value in optional if value)

    profiles = (
        ("Girl Details", s.girl),
        ("Boy Details", s.boy),
        ("Second Girl Details", s.girl2),
        ("Second Boy Details", s.boy2),
    )
    for title, profile in profiles:
        if profile is not None:
            rows.extend(_partial_profile_rows(title, profile))

    if for_admin:
        rows.append(_th_row("UTR / Ref", _e(s.utr_number)))
    rows.append(_th_row("Terms &amp; Disclaimer", "Accepted"))
    if s.question and s.question != "N/A":
        rows.append(
            '<tr><th style="padding-top:12px">Question/Purpose</th>'
            '<td style="padding-top:12px; font-style: italic; color: #555;">'
            f"&quot;{_e(s.question)}&quot;</td></tr>"
        )

    body = "\n                ".join(rows)
    return f"""
        <div class="details-box">
            <table class="details-table">
                {body}
            </table>
        </div>
"""


def _pair_rows(girl: Profile, boy: Profile) -> list[str]:
    return [
        f"<tr><td>Name</td><td>{_e(girl.name)}</td><td>{_e(boy.name)}</td></tr>",
        f"<tr><td>DOB</td><td>{_e(girl.dob)}</td><td>{_e(boy.dob)}</td></tr>",
        f"<tr><td>Time</td><td>{_e(format_time(girl.time))}</td>"
        f"<td>{_e(format_time(boy.time))}</td></tr>",
        f"<tr><td>Place</td><td>{_e(girl.place)}</td><td>{_e(boy.place)}</td></tr>",
        f"<tr><td>Pincode</td><td>{_e(girl.pincode) or '-'}</td>"
        f"<td>{_e(boy.pincode) or '-'}</td></tr>",
    ]


def _section(title: str, color: str) -> str:
    return (
        f'<tr><td colspan="3" style="{SECTION_STYLE} color:{color}; '
        f'text-align: center;">{title}</td></tr>'
    )


def _wide_row(label: str, value_html: str) -> str:
    return f'<tr><td>{label}</td><td colspan="2">{value_html}</td></tr>'


def _single_profile_rows(title: str, color: str, p: Profile) -> list[str]:
    return [
        _section(title, color),
        _wide_row("Name", _e(p.name)),
        _wide_row("DOB", _e(p.dob)),
        _wide_row("Time", _e(format_time(p.time))),
        _wide_row("Place", _e(p.place)),
        _wide_row("Pincode", _e(p.pincode) or "-"),
    ]


def _match_details(m: MatchConsultation, for_admin: bool) -> str:
    rows: list[str] = []
    if for_admin:
        rows.append(
            '<tr><td colspan="3" style="text-align:center; font-weight:bold; '
            f'padding-bottom:10px;">Client Name: {_e(m.full_name)}</td></tr>'
        )
    rows.append(
        '<tr><th style="width:20%">Field</th>'
        '<th style="width:40%; color:#d53f8c">Girl</th>'
        '<th style="width:40%; color:#3182ce">Boy</th></tr>'
    )
    rows.extend(_pair_rows(m.girl, m.boy))
    if m.girl2 is not None:
        rows.extend(_single_profile_rows("--- Second Girl Details ---", "#d53f8c", m.girl2))
    if m.boy2 is not None:
        rows.extend(_single_profile_rows("--- Second Boy Details ---", "#3182ce", m.boy2))

    birth = (
        ("DOB", m.dob),
        ("Time", format_time(m.birth_time)),
        ("Place", m.birth_place),
        ("Pincode", m.pincode),
    )
    if any(value for _, value in birth):
        rows.append(
            f'<tr><td colspan="3" style="{SECTION_STYLE} color:#6b46c1">'
            "Client Birth Details</td></tr>"
        )
        rows.extend(_wide_row(label, _e(value)) for label, value in birth if value)

    preferred = (
        ("Start Date", m.start_date),
        ("End Date", m.end_date),
        ("For Location", m.muhurtham_location),
    )
    if any(value for _, value in preferred):
        rows.append(
            f'<tr><td colspan="3" style="{SECTION_STYLE} color:#702459">'
            "Preferred Date Range</td></tr>"
        )
        rows.extend(_wide_row(label, _e(value)) for label, value in preferred if value)

    if m.question and m.question != "N/A":
        rows.append(_wide_row("Question/Purpose", f"&quot;{_e(m.question)}&quot;"))

    if for_admin:
        rows.append(
            f'<tr><td colspan="3" style="{SECTION_STYLE} color:#555">'
            "Contact Info</td></tr>"
        )
        rows.append(_wide_row("Phone", _e(m.phone)))
        rows.append(_wide_row("Email", _e(m.email)))
        rows.append(_wide_row("Payment", _e(m.price)))
        rows.append(_wide_row("UTR", _e(m.utr_number)))

    rows.append(
        '<tr><td colspan="3" style="border-top:1px solid #eee; padding-top:8px; '
        'color:#555;"><strong style="color:#2d3748">Terms &amp; Disclaimer:</strong> '
        "Accepted</td></tr>"
    )

    body = "\n                ".join(rows)
    return f"""
        <div class="details-box">
            <table class="details-table" style="width:100%">
                {body}
            </table>
        </div>
"""


def consultation_details(submission: Consultation, for_admin: bool) -> str:
    if isinstance(submission, MatchConsultation):
        return _match_details(submission, for_admin)
    return _standard_details(submission, for_admin)


def contact_details(inquiry: ContactInquiry, for_admin: bool) -> str:
    if for_admin:
        return f"""
        <div class="details-box">
            <table class="details-table">
                {_th_row("Name", _e(inquiry.full_name))}
                {_th_row("Email", _e(inquiry.email))}
                {_th_row("Message", _e(inquiry.message))}
            </table>
        </div>
"""
    return f"""
        <div class="details-box">
            <p style="font-style: italic; color: #666;">&quot;{_e(inquiry.message)}&quot;</p>
            <p style="font-size: 14px; margin-top: 10px; color: #888;">We will respond to this email address: {_e(inquiry.email)}</p>
        </div>
"""


def booking_admin_message() -> str:
    return (
        "<p>Dear Admin,</p>"
        "<p>A new consultation request has been submitted. "
        "Verify the details below.</p>"
    )


def booking_user_message(submission: Consultation) -> str:
    return (
        f"<p>Namaste {_e(submission.full_name)},</p>"
        "<p>Thank you for choosing us. We have received your request for "
        f"<strong>{_e(submission.consultation_type)}</strong>.</p>"
        "<p>Our team is verifying your payment "
        f"(UTR: {_e(submission.utr_number)}). We will contact you shortly.</p>"
    )


def contact_admin_message() -> str:
    return (
        "<p>Dear Admin,</p>"
        "<p>You have received a new message from the contact form.</p>"
        "<p>See attached image if available.</p>"
    )


def contact_user_message() -> str:
    return (
        "<p>Thank you for reaching out to us. We have received your message "
        "and will get back to you shortly.</p>"
    )
