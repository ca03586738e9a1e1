"""Calendar title rendering.

Titles carry the recruitment phase and, when the row has a venue, whether
the engagement is online or in person::

    [ES]Acme              no location
    [オ][1次面接]Acme      online
    [対面][説]Acme         in person, briefing phase abbreviated

Online detection is an exact, case-sensitive match on the configured
sentinel.  Any other non-empty location, including an address that merely
mentions the web, counts as in person.
"""

from __future__ import annotations

from gss_calendar.config import TitleRules

_DEFAULT_RULES = TitleRules()


def format_title(
    status: str,
    company: str,
    location: str,
    rules: TitleRules = _DEFAULT_RULES,
) -> str:
    """Render the display title for a schedule row.

    Args:
        status: Recruitment phase of the row.
        company: Organisation name.
        location: Venue text; ``""`` when unspecified.
        rules: Marker configuration.

    Returns:
        The deterministic calendar title.
    """
    if not location:
        return f"[{status}]{company}"

    place = rules.online_mark if location == rules.online_sentinel else rules.in_person_mark
    phase = rules.briefing_mark if status == rules.briefing_status else status
    return f"[{place}][{phase}]{company}"
