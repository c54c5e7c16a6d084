from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request

from pedigree_engine.application.errors import ValidationError
from pedigree_engine.application.use_cases.pedigree import (
    analyze_pair,
    build_ancestry,
    compute_coi,
    find_matches,
    predict_traits,
)
from pedigree_engine.config.settings import Settings
from pedigree_engine.interfaces.http.deps import get_app_settings, get_loader, get_store
from pedigree_engine.interfaces.http.schemas.pedigree import (
    AncestryResponse,
    BreedingAnalysisResponse,
    CoiResponse,
    MatchRequest,
    PairAnalysisResponse,
    PredictedTraitResponse,
)

router = APIRouter(tags=["pedigree"])


def _resolve_depth(max_depth: int | None, settings: Settings) -> int:
    depth = max_depth if max_depth is not None else settings.default_max_depth
    if depth > settings.max_allowed_depth:
        raise ValidationError(
            f"max_depth must not exceed {settings.max_allowed_depth}",
            details={"max_depth": depth},
        )
    return depth


@router.get("/individuals/{individual_id}/ancestry", response_model=AncestryResponse)
async def get_ancestry(
    individual_id: str,
    request: Request,
    max_depth: int | None = Query(None, ge=1, description="Generations to include"),
    settings: Settings = Depends(get_app_settings),
    store=Depends(get_store),
) -> AncestryResponse:
    depth = _resolve_depth(max_depth, settings)
    result = await build_ancestry.execute(
        store, individual_id, depth, loader=get_loader(request, store)
    )
    return AncestryResponse.model_validate(result)


@router.get("/relatedness", response_model=CoiResponse)
async def get_relatedness(
    request: Request,
    a: str = Query(..., description="First individual id"),
    b: str = Query(..., description="Second individual id"),
    max_depth: int | None = Query(None, ge=1),
    settings: Settings = Depends(get_app_settings),
    store=Depends(get_store),
) -> CoiResponse:
    depth = _resolve_depth(max_depth, settings)
    result = await compute_coi.execute(store, a, b, depth, loader=get_loader(request, store))
    return CoiResponse.model_validate(result)


@router.post("/individuals/{individual_id}/matches", response_model=BreedingAnalysisResponse)
async def post_matches(
    individual_id: str,
    payload: MatchRequest,
    request: Request,
    settings: Settings = Depends(get_app_settings),
    store=Depends(get_store),
) -> BreedingAnalysisResponse:
    options = payload.to_options(settings)
    _resolve_depth(options.max_depth, settings)
    analysis = await find_matches.execute(
        store,
        individual_id,
        payload.candidate_ids,
        options,
        loader=get_loader(request, store),
    )
    return BreedingAnalysisResponse.model_validate(analysis)


@router.get("/pairs/{id_a}/{id_b}", response_model=PairAnalysisResponse)
async def get_pair_analysis(
    id_a: str,
    id_b: str,
    request: Request,
    max_depth: int | None = Query(None, ge=1),
    locale: str | None = Query(None),
    settings: Settings = Depends(get_app_settings),
    store=Depends(get_store),
) -> PairAnalysisResponse:
    options = MatchRequest(max_depth=_resolve_depth(max_depth, settings), locale=locale)
    analysis = await analyze_pair.execute(
        store,
        id_a,
        id_b,
        options.to_options(settings),
        loader=get_loader(request, store),
    )
    return PairAnalysisResponse.model_validate(analysis)


@router.get("/pairs/{id_a}/{id_b}/traits", response_model=list[PredictedTraitResponse])
async def get_pair_traits(
    id_a: str,
    id_b: str,
    store=Depends(get_store),
) -> list[PredictedTraitResponse]:
    traits = await predict_traits.execute(store, id_a, id_b)
    return [PredictedTraitResponse.model_validate(t) for t in traits]
