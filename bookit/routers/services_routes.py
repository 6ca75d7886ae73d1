# bookit/routers/services_routes.py

from fastapi import APIRouter, Depends

from bookit.auth import get_current_user
from bookit.ids import generate_id
from bookit.schemas import Ack, CreatedService, ServiceRequest, UserAck

router = APIRouter(
    prefix="/services",
    tags=["services"],
)


@router.get("", response_model=UserAck)
def list_services(current_user: dict = Depends(get_current_user)):
    return {"message": "Fetch services from local store", "user_id": current_user["id"]}


@router.post("", response_model=CreatedService)
def create_service(
    body: ServiceRequest,
    current_user: dict = Depends(get_current_user),
):
    return {
        "id": generate_id("svc"),
        "message": "Service created",
        "owner_id": current_user["id"],
    }


@router.put("/{service_id}", response_model=Ack)
def update_service(
    service_id: str,
    body: ServiceRequest,
    current_user: dict = Depends(get_current_user),
):
    return {"message": "Service updated", "id": service_id}


@router.delete("/{service_id}", response_model=Ack)
def delete_service(
    service_id: str,
    current_user: dict = Depends(get_current_user),
):
    return {"message": "Service deleted", "id": service_id}
