"""Plain-text formatters for the console screens."""

from __future__ import annotations

from ..models import AwardeeReport, SummaryReport


GREEN = "\033[0;32m"
RESET = "\033[0m"

PROGRAM_TITLE = "TUITION GRANT APPLICATION SYSTEM"
AUTHOR = "D. Perry"
LICENCE = "D. PERRY DIGITAL ENTERPRISE"
PRESS_ENTER = "Press Enter to continue..."

_BANNER_RULE = "=" * 82
_MENU_RULE = "-" * 41


def _colored(lines: list[str], use_color: bool) -> str:
    text = "\n".join(lines)
    if use_color:
        return f"{GREEN}{text}{RESET}"
    return text


def _heading(title: str, rule: str) -> list[str]:
    return [rule, "", title, rule]


def fmt_amount(value: float) -> str:
    """Dollar amount without a currency sign: whole numbers print bare."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"


# ---------------------------------------------------------------------------
# Fixed screens
# ---------------------------------------------------------------------------

def format_splash(version: str, use_color: bool = True) -> str:
    lines = [
        "",
        _BANNER_RULE,
        "   WELCOME TO THE STUDENTS' TUITION GRANTS APPLICATION SYSTEM   ",
        _BANNER_RULE,
        f"    VERSION: {version}",
        "    DESCRIPTION: This program checks the criteria for students to receive grants.",
        f"    AUTHOR: {AUTHOR}",
        f"    LICENCE#: {LICENCE}",
        _BANNER_RULE,
        "",
        "",
        PRESS_ENTER,
    ]
    return _colored(lines, use_color)


def format_menu(use_color: bool = True) -> str:
    lines = [
        _MENU_RULE,
        PROGRAM_TITLE,
        _MENU_RULE,
        "MENU OPTIONS",
        _MENU_RULE,
        "A.  INPUT APPLICATION DETAILS FOR STUDENT",
        "B.  DISPLAY SUMMARY OF APPLICATIONS",
        "C.  DISPLAY GRANT AWARDEES",
        "X.  EXIT",
        _MENU_RULE,
    ]
    return _colored(lines, use_color)


def format_entry_header(processed: int) -> str:
    rule = "_" * 39
    return "\n".join([
        "",
        f"NUMBER OF APPLICATIONS PROCESSED: {processed}",
        rule,
        "INPUT APPLICATION DETAILS FOR STUDENT",
        rule,
        "",
    ])


# ---------------------------------------------------------------------------
# Reports
# ---------------------------------------------------------------------------

def format_summary(report: SummaryReport) -> str:
    lines = _heading("DISPLAY SUMMARY OF APPLICATIONS", "_" * 42)
    lines.append(f"CURRENT NUMBER OF STUDENT APPLICATIONS: {report.count}")
    lines.extend(["", ""])

    if report.is_empty:
        rule = "=" * 34
        lines.extend([rule, "NO APPLICATIONS TO SUMMARIZE", rule, ""])
    else:
        for entry in report.entries:
            lines.extend([
                "",
                f"APPLICATION NUMBER: {entry.application_number}",
                f"STUDENT NAME: {entry.student_name}",
                f"TUITION SHORTFALL ($): {fmt_amount(entry.shortfall)}",
                f"STATUS: {entry.status.value}",
            ])
        lines.append("")

    stats = report.statistics
    lines.extend([
        f"TOTAL TUITION SHORTFALL ($): {fmt_amount(stats.total)}",
        f"AVERAGE TUITION SHORTFALL ($): {fmt_amount(stats.average)}",
        f"MAXIMUM TUITION SHORTFALL ($): {fmt_amount(stats.maximum)}",
        f"MINIMUM TUITION SHORTFALL ($): {fmt_amount(stats.minimum)}",
        "",
    ])
    return "\n".join(lines)


def format_awardees(report: AwardeeReport) -> str:
    lines = _heading("GRANT AWARDEES RECORDS", "_" * 28)
    lines.append("")

    for entry in report.entries:
        lines.extend([
            f"APPLICATION NUMBER: {entry.application_number}",
            f"STUDENT NAME: {entry.student_name}",
            f"POINTS FROM GPA: {entry.gpa_points}",
            f"POINTS FROM SHORTFALL: {entry.shortfall_points}",
            f"TOTAL ACCUMULATED POINTS: {entry.total_points}",
            "",
            entry.award_tier.message,
            "",
        ])

    if not report.has_grants:
        lines.extend(["ZERO GRANTS APPROVED", ""])

    return "\n".join(lines)
