# backend/dealership/routers/meta.py
from fastapi import APIRouter, HTTPException

from dealership.core.api import ok
from dealership.domain.resources import RESOURCES

router = APIRouter(prefix="/api/meta", tags=["meta"])


@router.get("/resources")
def list_resources():
    return ok([{"slug": r.slug, "title": r.title, "label": r.label} for r in RESOURCES.values()])


@router.get("/resources/{slug}")
def describe_resource(slug: str):
    res = RESOURCES.get(slug)
    if res is None:
        raise HTTPException(status_code=404, detail="Resource not found")
    return ok({
        "slug": res.slug,
        "title": res.title,
        "label": res.label,
        "business_key": res.business_key,
        "server_generated_key": res.key_prefix is not None,
        "lookup": list(res.lookup),
        "filters": list(res.query_params()),
        "default_limit": res.default_limit,
        "create_schema": res.create_schema.model_json_schema(),
        "update_schema": res.update_schema.model_json_schema(),
    })
