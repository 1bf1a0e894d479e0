"""FastAPI server exposing wardrobe and outfit suggestion endpoints."""

from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query

from logic.validation import (
    ClothingItemInput,
    ClothingItemUpdate,
    OutfitUpdate,
    SaveOutfitRequest,
    SuggestionRequest,
    SuggestionResponse,
)
from tools.wardrobe_tools import WardrobeTools
from wardrobe_app.config import WardrobeConfig
from wardrobe_app.logging_config import configure_logging

config = WardrobeConfig.from_env()
configure_logging(config.log_level)

app = FastAPI(title="Wardrobe Suggestions", version="0.1.0")
_tools: Optional[WardrobeTools] = None


def get_tools() -> WardrobeTools:
    """Return the process-wide tools instance, created on first use."""

    global _tools
    if _tools is None:
        _tools = WardrobeTools(config=config)
    return _tools


@app.get("/healthz")
async def healthcheck() -> dict:
    """Lightweight readiness probe."""

    return {
        "status": "ok",
        "service": "wardrobe-suggestions",
        "environment": config.environment or "local",
    }


@app.post("/clothings", status_code=201)
def add_clothing(
    item: ClothingItemInput,
    user_id: str = Query(..., min_length=1),
    tools: WardrobeTools = Depends(get_tools),
) -> dict:
    """Catalogue a new clothing item for the user."""

    return tools.add_clothing_item(user_id=user_id, item_data=item.model_dump())


@app.get("/clothings")
def list_clothings(user_id: str = Query(..., min_length=1), tools: WardrobeTools = Depends(get_tools)) -> List[dict]:
    return tools.list_clothing_items(user_id=user_id)


@app.get("/clothings/{item_id}")
def get_clothing(
    item_id: str,
    user_id: str = Query(..., min_length=1),
    tools: WardrobeTools = Depends(get_tools),
) -> dict:
    item = tools.get_clothing_item(user_id=user_id, item_id=item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Clothing item not found")
    return item


@app.put("/clothings/{item_id}")
def update_clothing(
    item_id: str,
    changes: ClothingItemUpdate,
    user_id: str = Query(..., min_length=1),
    tools: WardrobeTools = Depends(get_tools),
) -> dict:
    """Edit the supplied fields of a catalogued item."""

    item = tools.update_clothing_item(user_id=user_id, item_id=item_id, item_data=changes.model_dump())
    if item is None:
        raise HTTPException(status_code=404, detail="Clothing item not found")
    return item


@app.delete("/clothings/{item_id}")
def delete_clothing(
    item_id: str,
    user_id: str = Query(..., min_length=1),
    tools: WardrobeTools = Depends(get_tools),
) -> dict:
    if not tools.delete_clothing_item(user_id=user_id, item_id=item_id):
        raise HTTPException(status_code=404, detail="Clothing item not found")
    return {"deleted": item_id}


@app.post("/outfits/suggest", response_model=SuggestionResponse)
def suggest_outfits(request: SuggestionRequest, tools: WardrobeTools = Depends(get_tools)) -> dict:
    """Generate outfit suggestions from the user's current wardrobe."""

    response = tools.suggest_outfits(**request.model_dump())
    if response.get("status") != "ok":
        raise HTTPException(status_code=400, detail=response.get("message", "suggestion failed"))
    return response


@app.post("/outfits", status_code=201)
def save_outfit(request: SaveOutfitRequest, tools: WardrobeTools = Depends(get_tools)) -> dict:
    """Persist an outfit, usually one picked from the suggestions."""

    try:
        return tools.save_outfit(**request.model_dump())
    except LookupError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@app.get("/outfits")
def list_outfits(user_id: str = Query(..., min_length=1), tools: WardrobeTools = Depends(get_tools)) -> List[dict]:
    return tools.list_outfits(user_id=user_id)


@app.get("/outfits/{outfit_id}")
def get_outfit(
    outfit_id: str,
    user_id: str = Query(..., min_length=1),
    tools: WardrobeTools = Depends(get_tools),
) -> dict:
    outfit = tools.get_outfit(user_id=user_id, outfit_id=outfit_id)
    if outfit is None:
        raise HTTPException(status_code=404, detail="Outfit not found")
    return outfit


@app.put("/outfits/{outfit_id}")
def update_outfit(
    outfit_id: str,
    changes: OutfitUpdate,
    user_id: str = Query(..., min_length=1),
    tools: WardrobeTools = Depends(get_tools),
) -> dict:
    try:
        outfit = tools.update_outfit(user_id=user_id, outfit_id=outfit_id, outfit_data=changes.model_dump())
    except LookupError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    if outfit is None:
        raise HTTPException(status_code=404, detail="Outfit not found")
    return outfit


@app.delete("/outfits/{outfit_id}")
def delete_outfit(
    outfit_id: str,
    user_id: str = Query(..., min_length=1),
    tools: WardrobeTools = Depends(get_tools),
) -> dict:
    if not tools.delete_outfit(user_id=user_id, outfit_id=outfit_id):
        raise HTTPException(status_code=404, detail="Outfit not found")
    return {"deleted": outfit_id}


def get_app() -> FastAPI:
    """Expose the FastAPI instance for ASGI servers."""

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:app", host="0.0.0.0", port=int("8080"), reload=False)
