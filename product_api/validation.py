# product_api/validation.py
import math
from typing import Any, List


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid price; NaN and inf cannot be rendered back as JSON
    if isinstance(value, float):
        return math.isfinite(value)
    return isinstance(value, int) and not isinstance(value, bool)


def validate_product(candidate: Any) -> List[str]:
    """Check a product body and return every defect found (empty when valid).

    The same rules apply to create and update; an update body must still
    carry name, price and category.
    """
    body = candidate if isinstance(candidate, dict) else {}
    errors: List[str] = []

    name = body.get("name")
    if not isinstance(name, str) or len(name) < 3:
        errors.append("Name: required, string, min 3 characters.")

    price = body.get("price")
    if not _is_number(price) or price <= 0:
        errors.append("Price: required, positive number.")

    category = body.get("category")
    if not isinstance(category, str) or not category:
        errors.append("Category: required, string.")

    if "inStock" in body and not isinstance(body["inStock"], bool):
        errors.append("inStock: must be a boolean (true/false) if provided.")

    description = body.get("description")
    if description is not None and not isinstance(description, str):
        errors.append("Description: must be a string if provided.")

    return errors
