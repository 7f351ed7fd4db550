from fastapi import APIRouter, Depends

from travelai.services.store_service import StoreState, TravelStore, get_store

router = APIRouter(tags=["store"])


@router.get("/store", response_model=StoreState)
def get_state(store: TravelStore = Depends(get_store)):
    return store.state


@router.delete("/store", response_model=StoreState)
def clear_state(store: TravelStore = Depends(get_store)):
    return store.clear_all()
