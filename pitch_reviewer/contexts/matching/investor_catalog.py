"""
Investor catalog for the Matching context.

The built-in catalog is a fixed list of LATAM early-stage funds. A custom
catalog can be loaded from the `investors` list of a YAML config:

    investors:
      - name: Fondo Andino
        geo: Andes/LATAM
        focus: B2B SaaS, Fintech
        stages: [Pre-seed, Seed]
        min_ticket: 100000
        max_ticket: 600000
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, FrozenSet, Optional, Tuple

from pitch_reviewer.utils.config import load_config, resolve_config_path
from pitch_reviewer.utils.exceptions import ConfigurationError

REQUIRED_PROFILE_FIELDS = ("name", "geo", "focus", "stages", "min_ticket", "max_ticket")


@dataclass(frozen=True)
class InvestorProfile:
    """
    One catalog entry.

    Attributes:
        name: Fund name
        geo: Geography label (e.g., "México/LATAM")
        focus: Comma-separated sector focus label
        stages: Stage labels the fund invests in
        min_ticket: Smallest ticket, in minor currency units
        max_ticket: Largest ticket, in minor currency units
    """

    name: str
    geo: str
    focus: str
    stages: FrozenSet[str]
    min_ticket: int
    max_ticket: int


def _profile(name, geo, focus, stages, min_ticket, max_ticket) -> InvestorProfile:
    return InvestorProfile(name, geo, focus, frozenset(stages), min_ticket, max_ticket)


# Catalog order is the final tie-break when ranking
DEFAULT_INVESTOR_CATALOG: Tuple[InvestorProfile, ...] = (
    _profile("Fondo Andino", "Andes/LATAM", "B2B SaaS, Fintech", ("Pre-seed", "Seed"), 100_000, 600_000),
    _profile("Río Ventures", "Brasil/LATAM", "Marketplaces, SMB SaaS", ("Pre-seed", "Seed"), 150_000, 800_000),
    _profile("Pacífico Capital", "México/LATAM", "Fintech, Infra", ("Pre-seed", "Seed"), 200_000, 1_000_000),
    _profile("Pampas Partners", "Cono Sur", "AgroTech, B2B", ("Pre-seed", "Seed"), 100_000, 500_000),
    _profile("Caribe Labs", "Caribe", "B2C apps, Payments", ("Pre-seed", "Seed"), 50_000, 300_000),
    _profile("Altiplano Ventures", "Andes", "Data/AI, SaaS", ("Pre-seed", "Seed"), 100_000, 700_000),
)


def profile_from_dict(entry: Dict[str, Any], config_path: Optional[Path] = None) -> InvestorProfile:
    """
    Build an InvestorProfile from a config mapping.

    Raises:
        ConfigurationError: If a field is missing or tickets are not integers
    """
    missing = [key for key in REQUIRED_PROFILE_FIELDS if key not in entry]
    if missing:
        raise ConfigurationError(
            f"Investor entry is missing fields {missing}",
            config_path=config_path,
            key=str(entry.get("name", "<unnamed>")),
        )

    min_ticket, max_ticket = entry["min_ticket"], entry["max_ticket"]
    if not isinstance(min_ticket, int) or not isinstance(max_ticket, int):
        raise ConfigurationError(
            "Ticket bounds must be integers", config_path=config_path, key=str(entry["name"])
        )

    stages = entry["stages"]
    if isinstance(stages, str):
        stages = [stages]

    return _profile(
        str(entry["name"]), str(entry["geo"]), str(entry["focus"]), stages, min_ticket, max_ticket
    )


def load_investor_catalog(config_path: Optional[Path] = None) -> Tuple[InvestorProfile, ...]:
    """
    Load the investor catalog from the config's `investors` list.

    Args:
        config_path: Optional path to YAML config (defaults to PITCH_REVIEWER_CONFIG_PATH)

    Returns:
        Catalog in file order, or DEFAULT_INVESTOR_CATALOG when no list is configured
    """
    config = load_config(config_path)
    entries = config.get("investors")
    if not entries:
        return DEFAULT_INVESTOR_CATALOG

    path = resolve_config_path(config_path)
    if not isinstance(entries, list):
        raise ConfigurationError("'investors' must be a list", config_path=path, key="investors")

    return tuple(profile_from_dict(entry, config_path=path) for entry in entries)
