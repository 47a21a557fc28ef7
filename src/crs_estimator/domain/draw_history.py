"""Bundled Express Entry invitation rounds, 2023 to 2025, most recent first.

Cutoffs and invitation counts are rounded to the published values at the time
the table was compiled.
"""

from __future__ import annotations

from .eligibility import Draw, DrawDataset, DrawType


def _draw(date: str, draw_type: DrawType, score: int, invitations: int) -> Draw:
    return Draw(
        id=f"{date}-{draw_type.value.lower()}",
        date=date,
        type=draw_type,
        score=score,
        invitations=invitations,
    )


HISTORICAL_DRAWS = DrawDataset(
    draws=(
        _draw("2025-03-21", DrawType.FRENCH, 379, 7500),
        _draw("2025-03-17", DrawType.PNP, 736, 536),
        _draw("2025-03-06", DrawType.FRENCH, 410, 4500),
        _draw("2025-03-03", DrawType.PNP, 750, 725),
        _draw("2025-02-19", DrawType.FRENCH, 428, 6500),
        _draw("2025-02-17", DrawType.PNP, 750, 646),
        _draw("2025-02-05", DrawType.CEC, 521, 4000),
        _draw("2025-02-04", DrawType.PNP, 802, 455),
        _draw("2025-01-23", DrawType.CEC, 527, 4000),
        _draw("2025-01-08", DrawType.CEC, 542, 1350),
        _draw("2024-12-16", DrawType.PNP, 720, 1157),
        _draw("2024-11-19", DrawType.HEALTHCARE, 463, 800),
        _draw("2024-11-14", DrawType.TRADES, 433, 1800),
        _draw("2024-10-10", DrawType.FRENCH, 444, 1000),
        _draw("2024-09-19", DrawType.FRENCH, 446, 1000),
        _draw("2024-08-27", DrawType.CEC, 507, 3300),
        _draw("2024-07-18", DrawType.FRENCH, 400, 1800),
        _draw("2024-07-16", DrawType.CEC, 515, 6300),
        _draw("2024-07-05", DrawType.HEALTHCARE, 476, 3750),
        _draw("2024-07-04", DrawType.TRADES, 436, 1800),
        _draw("2024-05-31", DrawType.PNP, 676, 2985),
        _draw("2024-05-30", DrawType.CEC, 522, 3000),
        _draw("2024-04-24", DrawType.FRENCH, 410, 1400),
        _draw("2024-04-11", DrawType.STEM, 491, 4500),
        _draw("2024-03-25", DrawType.GENERAL, 524, 1980),
        _draw("2024-03-13", DrawType.TRANSPORT, 430, 975),
        _draw("2024-02-16", DrawType.AGRICULTURE, 437, 150),
        _draw("2024-02-01", DrawType.FRENCH, 365, 7000),
        _draw("2024-01-31", DrawType.GENERAL, 535, 730),
        _draw("2023-12-21", DrawType.AGRICULTURE, 386, 1000),
        _draw("2023-12-07", DrawType.FRENCH, 470, 1000),
        _draw("2023-12-06", DrawType.GENERAL, 561, 4750),
        _draw("2023-10-26", DrawType.HEALTHCARE, 431, 3600),
        _draw("2023-09-28", DrawType.AGRICULTURE, 354, 600),
        _draw("2023-08-03", DrawType.TRADES, 388, 1500),
        _draw("2023-08-02", DrawType.TRANSPORT, 435, 1500),
        _draw("2023-07-12", DrawType.FRENCH, 375, 3800),
        _draw("2023-07-11", DrawType.GENERAL, 505, 800),
        _draw("2023-07-07", DrawType.FRENCH, 439, 2300),
        _draw("2023-07-06", DrawType.HEALTHCARE, 463, 1500),
        _draw("2023-07-05", DrawType.STEM, 486, 500),
        _draw("2023-06-28", DrawType.HEALTHCARE, 476, 500),
        _draw("2023-05-31", DrawType.GENERAL, 488, 4800),
    )
)
