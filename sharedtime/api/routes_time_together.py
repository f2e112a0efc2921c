"""
Routes sans état: prévisualisation du calcul et consultation des espérances de vie.

Expose `/time-together/preview` et `/life-expectancy/...`.
"""

from fastapi import APIRouter

from sharedtime.api.schemas import LifeExpectancyResponse, PreviewRequest
from sharedtime.core.container import container
from sharedtime.domain.entities import FamilyMember, VisualizationResult
from sharedtime.domain.life_expectancy import COUNTRIES

router = APIRouter(tags=["time-together"])


@router.post("/time-together/preview", response_model=VisualizationResult)
async def preview(payload: PreviewRequest):
    """Calcule un résultat à partir des données fournies, sans rien enregistrer."""
    member = FamilyMember(
        id="preview",
        name="preview",
        birth_date=payload.birth_date,
        together_since=payload.together_since,
    )
    return await container.service.preview(member, payload.params, today=payload.today)


@router.get("/life-expectancy/countries", response_model=list[str])
def list_countries():
    """Pays proposés à la sélection."""
    return COUNTRIES


@router.get("/life-expectancy/{country}", response_model=LifeExpectancyResponse)
async def get_life_expectancy(country: str):
    """Chiffres d'un pays; en cas d'échec du fournisseur, la table de repli est utilisée."""
    figure = await container.service.life_expectancy(country)
    return {"country": country, **figure.model_dump()}
