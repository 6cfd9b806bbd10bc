"""Plain-text readout of a block's sky, localized through i18n."""

import math

from nextblock.i18n import t
from nextblock.telescope import Telescope


def describe_block(telescope: Telescope, lang: str = "en") -> list[str]:
    """Build one readout line per deriver.

    Args:
        telescope: Fully assembled readouts for one block.
        lang: Language code ('ko' or 'en') for headings.

    Returns:
        Lines in display order: date, moon, sun, tide, atmosphere.
    """
    lunar = telescope.lunar
    solar = telescope.solar
    phase = lunar.phase()
    cycle = lunar.cycle()
    season = solar.season()
    next_phase = t("next_in", lang).format(
        name=lunar.next_phase().name, blocks=lunar.blocks_until_next_phase
    )
    next_season = t("next_in", lang).format(
        name=solar.next_season().name, blocks=solar.blocks_until_next_season
    )
    conditions = telescope.atmosphere.conditions()
    atmosphere = (
        t("atmosphere_unbounded", lang) if math.isinf(conditions) else f"{conditions}"
    )

    return [
        f"{t('heading_date', lang)}: {telescope.formatted_date()}",
        f"{t('heading_lunar', lang)}: {phase.emoji} {phase.name} · "
        f"{cycle.emoji} {cycle.name} ({next_phase})",
        f"{t('heading_solar', lang)}: {season.emoji} {season.name} {season.suffix} "
        f"({next_season})",
        f"{t('heading_tidal', lang)}: {telescope.tidal.display()}",
        f"{t('heading_atmosphere', lang)}: {atmosphere}",
    ]
