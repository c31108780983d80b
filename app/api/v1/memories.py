from fastapi import APIRouter, Depends, File, UploadFile

from app.api.v1.errors import http_errors
from app.api.v1.schemas import (
    ContributorCreatedSchema,
    ContributorRequestSchema,
    MemoryCreatedSchema,
    MemoryListSchema,
    MemoryRequestSchema,
    MemoryResponseSchema,
    MemorySchema,
    MessageSchema,
    PhotoUploadedSchema,
)
from app.application.use_cases.memories import MemoryUseCase
from app.domain.entities.user import User
from app.wiring.dependencies import get_current_user, get_memory_use_case

router = APIRouter()


@router.post("/contributor", response_model=ContributorCreatedSchema, status_code=201)
def create_contributor(
    req: ContributorRequestSchema,
    uc: MemoryUseCase = Depends(get_memory_use_case),
):
    with http_errors():
        contributor = uc.create_contributor(
            name=req.name,
            email=req.email,
            relationship_type=req.relationship_type,
            relationship_years=req.relationship_years,
            user_id=req.user_id,
        )
    return ContributorCreatedSchema(message="Memory contributor created successfully", id=contributor.id)


@router.post("/upload", response_model=PhotoUploadedSchema)
def upload_photo(
    photo: UploadFile | None = File(None),
    uc: MemoryUseCase = Depends(get_memory_use_case),
):
    data = photo.file.read(uc.max_photo_bytes + 1) if photo is not None else b""
    with http_errors():
        url = uc.upload_photo(
            original_name=photo.filename if photo is not None else None,
            data=data,
            content_type=photo.content_type if photo is not None else None,
        )
    return PhotoUploadedSchema(message="Photo uploaded successfully", photo_url=url)


@router.post("", response_model=MemoryCreatedSchema, status_code=201)
def create_memory(
    req: MemoryRequestSchema,
    uc: MemoryUseCase = Depends(get_memory_use_case),
):
    with http_errors():
        memory = uc.create_memory(
            contributor_id=req.contributor_id,
            photo_url=req.photo_url,
            description=req.description,
            event_date=req.event_date,
        )
        view = uc.get_memory(memory.id)
    return MemoryCreatedSchema(message="Memory created successfully", memory=MemorySchema.from_view(view))


@router.get("/user/{user_id}", response_model=MemoryListSchema)
def get_user_memories(
    user_id: str,
    _: User = Depends(get_current_user),
    uc: MemoryUseCase = Depends(get_memory_use_case),
):
    views = uc.get_user_memories(user_id)
    return MemoryListSchema(memories=[MemorySchema.from_view(v) for v in views])


@router.get("/{memory_id}", response_model=MemoryResponseSchema)
def get_memory(
    memory_id: str,
    _: User = Depends(get_current_user),
    uc: MemoryUseCase = Depends(get_memory_use_case),
):
    with http_errors():
        view = uc.get_memory(memory_id)
    return MemoryResponseSchema(memory=MemorySchema.from_view(view))


@router.delete("/{memory_id}", response_model=MessageSchema)
def delete_memory(
    memory_id: str,
    user: User = Depends(get_current_user),
    uc: MemoryUseCase = Depends(get_memory_use_case),
):
    with http_errors():
        uc.delete_memory(memory_id, requesting_user_id=user.id)
    return MessageSchema(message="Memory deleted successfully")
