from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from mart.infra.Product_Repository import get_catalog_products, get_product_by_id
from mart.logic.reporting.nutrition import top_nutrients, primary_nutrient

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("")
def list_products(category: Optional[str] = Query(default=None),
                  search: Optional[str] = Query(default=None),
                  nutrition: Optional[str] = Query(default=None)):
    """Catalog listing with the category / search / nutrition preset filters."""
    products = get_catalog_products(category=category, search=search, nutrition=nutrition)
    return {"count": len(products), "products": [p.to_dict() for p in products]}


@router.get("/{product_id}")
def product_detail(product_id: str):
    product = get_product_by_id(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return {
        **product.to_dict(),
        "topNutrients": top_nutrients(product.nutrition),
        "primaryNutrient": primary_nutrient(product),
    }
