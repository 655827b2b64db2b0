import logging
import math
import re

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_profile_repository
from config import settings
from models.requests import ParseResumeRequest, UpdateProfileRequest
from models.responses import (
    Pagination,
    ProfileUpdateResponse,
    ResumeAnalysisResponse,
    ResumeDebugResponse,
    SignupResponse,
    TeammateSearchResponse,
)
from models.schemas.profile import UserProfile
from services import document_parser, resume_analyzer
from services.repository.base import ProfileRepository
from services.skill_extractor import parse_skill_list

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
ANY_AVAILABILITY = "Any Availability"


async def _read_resume(resume_file: UploadFile) -> str:
    """Validate an uploaded resume and decode it to text."""
    try:
        document_parser.document_kind(resume_file.filename, resume_file.content_type)
    except document_parser.UnsupportedDocumentError as e:
        raise HTTPException(status_code=400, detail=str(e))

    content = await resume_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    try:
        text = document_parser.extract_document_text(
            content, resume_file.filename, resume_file.content_type
        )
    except Exception:
        logger.exception("Could not decode resume %s", resume_file.filename)
        raise HTTPException(status_code=400, detail="Could not parse resume file")

    if not text.strip():
        raise HTTPException(status_code=400, detail="No text could be extracted from resume")
    return text[: settings.max_resume_chars]


def _analyze_and_store(
    repository: ProfileRepository, user_id: str | None, name: str, text: str
) -> ResumeAnalysisResponse:
    try:
        extraction = resume_analyzer.analyze_resume(text)
    except resume_analyzer.MissingTextError as e:
        raise HTTPException(status_code=400, detail=str(e))

    profile = repository.get(user_id) if user_id else None
    if profile is None:
        profile = UserProfile(id=user_id or repository.new_id(), name=name)
    elif name:
        profile = profile.model_copy(update={"name": name})

    profile = repository.save(resume_analyzer.apply_extraction(profile, extraction))
    matches = resume_analyzer.find_matches(profile, repository.list_profiles(profile.id))

    return ResumeAnalysisResponse(
        user_id=profile.id,
        skills=extraction.skills,
        github_links=extraction.github_links,
        projects=extraction.projects,
        achievements=extraction.achievements,
        matches=matches,
    )


@router.get("/health")
async def health(repository: ProfileRepository = Depends(get_profile_repository)):
    return {"status": "ok", "storage": repository.name}


@router.post("/resume/parse", response_model=ResumeAnalysisResponse)
@limiter.limit(settings.rate_limit)
async def parse_resume(
    request: Request,
    body: ParseResumeRequest,
    repository: ProfileRepository = Depends(get_profile_repository),
):
    return _analyze_and_store(repository, body.user_id, body.name, body.text)


@router.post("/resume/upload", response_model=ResumeAnalysisResponse)
@limiter.limit(settings.rate_limit)
async def upload_resume(
    request: Request,
    resume_file: UploadFile = File(...),
    user_id: str | None = Form(None),
    name: str = Form(""),
    repository: ProfileRepository = Depends(get_profile_repository),
):
    text = await _read_resume(resume_file)
    return _analyze_and_store(repository, user_id, name, text)


@router.post("/signup", response_model=SignupResponse, status_code=201)
@limiter.limit(settings.rate_limit)
async def signup(
    request: Request,
    full_name: str = Form(...),
    email: str = Form(...),
    bio: str = Form(""),
    availability: str = Form("Not specified"),
    skills: str = Form(""),
    resume_file: UploadFile | None = File(None),
    repository: ProfileRepository = Depends(get_profile_repository),
):
    if not full_name.strip() or not EMAIL_RE.match(email):
        raise HTTPException(status_code=400, detail="Please provide a name and a valid email address")
    if repository.get_by_email(email) is not None:
        raise HTTPException(status_code=409, detail="User with this email already exists")

    profile = UserProfile(
        id=repository.new_id(),
        name=full_name.strip(),
        email=email.lower(),
        bio=bio,
        availability=availability or "Not specified",
        skills=parse_skill_list(skills),
    )
    if resume_file is not None and resume_file.filename:
        text = await _read_resume(resume_file)
        profile = resume_analyzer.apply_extraction(
            profile, resume_analyzer.analyze_resume(text)
        )

    profile = repository.save(profile)
    logger.info("Signed up %s (%d skills)", profile.id, len(profile.skills))
    return SignupResponse(user=profile)


@router.post("/debug/resume-text", response_model=ResumeDebugResponse)
async def debug_resume_text(resume_file: UploadFile = File(...)):
    text = await _read_resume(resume_file)
    extraction = resume_analyzer.analyze_resume(text)
    return ResumeDebugResponse(
        text_length=len(text),
        first_lines=text.split("\n")[:10],
        skills=extraction.skills,
        github_links=extraction.github_links,
        projects=extraction.projects,
        achievements=extraction.achievements,
    )


@router.get("/users/{user_id}", response_model=UserProfile)
async def get_user(
    user_id: str, repository: ProfileRepository = Depends(get_profile_repository)
):
    profile = repository.get(user_id)
    if profile is None:
        raise HTTPException(status_code=404, detail="User not found")
    return profile


@router.put("/users/{user_id}", response_model=ProfileUpdateResponse)
@limiter.limit(settings.rate_limit)
async def update_user(
    request: Request,
    user_id: str,
    body: UpdateProfileRequest,
    repository: ProfileRepository = Depends(get_profile_repository),
):
    profile = repository.get(user_id)
    if profile is None:
        raise HTTPException(status_code=404, detail="User not found")

    changes = body.model_dump(exclude_none=True)
    if "skills" in changes:
        changes["skills"] = parse_skill_list(changes["skills"])
    profile = repository.save(profile.model_copy(update=changes))
    logger.info("Updated profile %s (%s)", user_id, ", ".join(sorted(changes)))
    return ProfileUpdateResponse(user=profile)


@router.get("/search/teammates", response_model=TeammateSearchResponse)
async def search_teammates(
    skills: str = "",
    availability: str = "",
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    repository: ProfileRepository = Depends(get_profile_repository),
):
    if availability == ANY_AVAILABILITY:
        availability = ""
    teammates, total = repository.search(
        skill=skills.strip() or None,
        availability=availability.strip() or None,
        page=page,
        limit=limit,
    )
    return TeammateSearchResponse(
        teammates=teammates,
        pagination=Pagination(
            total=total, page=page, limit=limit, pages=math.ceil(total / limit)
        ),
    )
