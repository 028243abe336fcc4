# This project was developed with assistance from AI tools.
"""Display formatting applied at render time only."""


def format_yen(amount: int) -> str:
    """85000 -> "85,000円"; zero or absent renders as an empty string."""
    if not amount:
        return ""
    return f"{amount:,}円"


def format_numeral(amount: int) -> str:
    """Numeral only, for slots whose unit is printed by the template."""
    if not amount:
        return ""
    return f"{amount:,}"


def format_years(years: int) -> str:
    if not years:
        return ""
    return f"{years}年間"
