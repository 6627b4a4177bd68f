"""
app/api/routers/materials.py

Material text parsing endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.domain.farm_import import ResolvedMaterial
from app.schemas.bulk_import import MaterialModel, MaterialParseRequest, MaterialParseResponse
from app.services.material_parser_service import MaterialTextParser, get_material_text_parser

router = APIRouter(prefix="/materials", tags=["materials"])


@router.post("/parse", response_model=MaterialParseResponse)
def parse_materials(
    payload: MaterialParseRequest,
    parser: MaterialTextParser = Depends(get_material_text_parser),
) -> MaterialParseResponse:
    """
    Resolve pasted material text and merge it into the caller's list.
    """

    existing = [ResolvedMaterial(name=item.name, count=item.count) for item in payload.existing]
    result = parser.parse(payload.text, existing=existing)
    return MaterialParseResponse(
        added=[MaterialModel(name=item.name, count=item.count) for item in result.added],
        failed=list(result.failed),
    )
