import math
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from . import settings


class FeedRecord(BaseModel):
    """
    One normalized row of the restock sheet.
    `stock` stays a float so a non-numeric cell can be carried as NaN.
    """

    model_config = ConfigDict(frozen=True)

    sku: str = Field(..., min_length=1)
    stock: float
    restock_date: str = ""

    @property
    def is_out_of_stock(self) -> bool:
        # NaN compares unequal to everything, including 0
        return not math.isnan(self.stock) and self.stock == 0


class MetafieldInput(BaseModel):
    """
    A single entry of the `metafields` argument to metafieldsSet.
    Dumped with aliases so the payload matches MetafieldsSetInput.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    owner_id: str = Field(..., alias="ownerId")
    namespace: str = settings.METAFIELD_NAMESPACE
    key: str = settings.METAFIELD_KEY
    value_type: str = Field(default=settings.METAFIELD_TYPE, alias="type")
    value: str = ""


class SyncSummary(BaseModel):
    status: Literal["no_targets", "unresolved", "dry_run", "synced"]
    targets: int = Field(default=0, ge=0)
    resolved: int = Field(default=0, ge=0)
    written: int = Field(default=0, ge=0)
    batches: int = Field(default=0, ge=0)
