from enum import StrEnum


class Severity(StrEnum):
    """Severity tier written into placeholder markers."""

    REQUIRED = "required"
    RECOMMENDED = "recommended"
    INTERESTING = "interesting"


class Grade(StrEnum):
    A_PLUS = "A+"
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


GRADE_COLORS: dict[Grade, str] = {
    Grade.A_PLUS: "#4CAF50",
    Grade.A: "#8BC34A",
    Grade.B: "#CDDC39",
    Grade.C: "#FFC107",
    Grade.D: "#FF5722",
    Grade.F: "#D32F2F",
}


def get_grade_color(grade: Grade) -> str:
    """
    Get the badge colour for a grade.

    Args:
        grade: The grade to look up.

    Returns:
        Hex colour string, dark red for anything unknown.
    """
    return GRADE_COLORS.get(grade, GRADE_COLORS[Grade.F])
