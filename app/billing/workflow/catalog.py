"""
Package catalog: the fixed set of purchasable access offers.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional


@dataclass(frozen=True)
class Package:
    id: str
    duration: timedelta
    price: int
    name: str


# display order is the insertion order
PACKAGES: dict[str, Package] = {
    "1h": Package(id="1h", duration=timedelta(hours=1), price=10, name="1 Hour"),
    "6h": Package(id="6h", duration=timedelta(hours=6), price=20, name="6 Hours"),
    "12h": Package(id="12h", duration=timedelta(hours=12), price=30, name="12 Hours"),
    "1d": Package(id="1d", duration=timedelta(days=1), price=50, name="1 Day"),
}


def lookup(package_id: Optional[str]) -> Optional[Package]:
    if not package_id:
        return None
    return PACKAGES.get(package_id)


def list_packages() -> list[Package]:
    return list(PACKAGES.values())


def expires_at(package: Package, now: datetime) -> datetime:
    """End of the access window for a package bought at ``now``."""
    return now + package.duration
