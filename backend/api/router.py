import asyncio

from fastapi import APIRouter, File, Form, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import BatchScreenRequest, ScreenRequest
from models.responses import BatchScreenResponse
from models.schemas.job_requirement import JobRequirement
from models.schemas.resume import Resume
from services.exceptions import ConfigurationError
from services.pipeline import orchestrator

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "text_analyzer": settings.text_analyzer,
    }


@router.post("/screen", response_model=Resume)
@limiter.limit("10/minute")
async def screen(request: Request, body: ScreenRequest):
    try:
        return await asyncio.to_thread(orchestrator.screen_resume, body.resume_text, body.job)
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/screen/upload", response_model=Resume)
@limiter.limit("10/minute")
async def screen_upload(
    request: Request,
    resume_file: UploadFile = File(...),
    title: str = Form(""),
    required_skills: str = Form(""),
    description: str = Form(""),
):
    # Validate file type
    if not resume_file.filename or not resume_file.filename.lower().endswith(".txt"):
        raise HTTPException(status_code=400, detail="Only plain text (.txt) files are accepted")

    # Read and validate size
    content = await resume_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    if len(description) > 10000:
        raise HTTPException(status_code=400, detail="Job description too long (max 10000 chars)")

    try:
        resume_text = content.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="Resume file must be UTF-8 text")

    job = JobRequirement(title=title, required_skills=required_skills, description=description)
    try:
        return await asyncio.to_thread(orchestrator.screen_resume, resume_text, job)
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/screen/batch", response_model=BatchScreenResponse)
@limiter.limit("10/minute")
async def screen_batch(request: Request, body: BatchScreenRequest):
    try:
        results = await orchestrator.screen_batch(
            body.resumes, body.job, max_workers=settings.batch_max_workers
        )
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return BatchScreenResponse(results=results)
