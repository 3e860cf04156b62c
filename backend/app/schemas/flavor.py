"""
Flavorbase Backend: Flavor Response Schemas
=============================================

What:  Pydantic models defining the JSON shape of flavor-related responses.
How:   Built from ORM rows with from_attributes; app.responses serializes them
       with model_dump(mode="json"), so Decimal fields become strings.

Nesting follows the route's `include`: a schema with a nested relation is
only used for rows whose relation was loaded by the repository call.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, computed_field


class VendorResponse(BaseModel):
    id: int
    code: str = Field(description="Short vendor code, e.g. CAP")
    name: str

    model_config = {"from_attributes": True}


class FlavorResponse(BaseModel):
    """A flavor row without relations (returned by create)."""

    id: int
    vendor_id: int
    name: str
    slug: str
    density: Optional[Decimal] = Field(default=None, description="g/ml, serialized as a string")

    model_config = {"from_attributes": True}


class FlavorDetailResponse(FlavorResponse):
    """
    What:  A flavor joined with its vendor.
    Who:   Returned by GET /flavor/{id}.

    Besides the nested vendor object, the join is also exposed flat
    (vendor_code, vendor_name, flavor_name) for list/table clients.
    """

    vendor: VendorResponse

    @computed_field
    @property
    def vendor_code(self) -> str:
        return self.vendor.code

    @computed_field
    @property
    def vendor_name(self) -> str:
        return self.vendor.name

    @computed_field
    @property
    def flavor_name(self) -> str:
        return self.name


class DataSupplierResponse(BaseModel):
    id: int
    name: str
    code: Optional[str] = None

    model_config = {"from_attributes": True}


class FlavorIdentifierResponse(BaseModel):
    flavor_id: int
    data_supplier_id: int
    identifier: str

    model_config = {"from_attributes": True}


class FlavorIdentifierDetailResponse(FlavorIdentifierResponse):
    """Identifier joined with the data supplier that issued it."""

    data_supplier: DataSupplierResponse
