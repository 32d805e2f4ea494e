from typing import List

from fastapi import Depends, FastAPI, HTTPException, Query

from country_normalizer.index.country_index import CountryIndex
from country_normalizer.loaders.dataset_loader import get_country_index
from country_normalizer.models.country import Country
from country_normalizer.models.schemas import (
    CountryOut,
    NormalizeRequest,
    NormalizeResult,
)
from country_normalizer.normalizers.name_normalizer import normalize_name

app = FastAPI(title="Country Normalizer API")


def get_index() -> CountryIndex:
    return get_country_index()


def _country_out(country: Country) -> CountryOut:
    return CountryOut(**country.to_dict())


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/countries", response_model=List[CountryOut])
def list_countries(index: CountryIndex = Depends(get_index)):
    return [_country_out(country) for country in sorted(index)]


@app.get("/countries/lookup", response_model=CountryOut)
def lookup_country(
    name: str = Query(..., description="Free-text country name, code or alias"),
    index: CountryIndex = Depends(get_index),
):
    country = index.normalize_country(name)
    if country is None:
        raise HTTPException(status_code=404, detail=f"No country matches '{name}'")
    return _country_out(country)


@app.post("/countries/normalize", response_model=List[NormalizeResult])
def normalize_countries(
    payload: NormalizeRequest, index: CountryIndex = Depends(get_index)
):
    results: List[NormalizeResult] = []
    for name in payload.names:
        country = index.normalize_country(name)
        results.append(
            NormalizeResult(
                query=name,
                key=normalize_name(name, index.rules),
                country=_country_out(country) if country is not None else None,
            )
        )
    return results
