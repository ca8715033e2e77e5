# product_api/models.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Union, Dict, Any

# JSON keys a client may set on a product; anything else in a body is ignored
PRODUCT_FIELDS = ("name", "description", "price", "category", "inStock")


class Product(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: Optional[str] = None
    price: Union[int, float]
    category: str
    in_stock: bool = Field(default=True, alias="inStock")

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
