# backend/content_models.py
"""
User-generated content models with quality control: guides, media, peer
review, local credibility, moderation, fact checks, seasonal updates and the
scoring/standards records that sit on top of them.
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


# ==========================================
# Credibility
# ==========================================

class CredibilityIndicators(BaseModel):
    claimed_local: bool
    verified_local: bool
    years_riding_here: Optional[int] = Field(default=None, ge=0)
    contributions_count: int = Field(ge=0)
    contribution_quality_avg: float = Field(ge=0, le=100)


class CredibilityVerification(BaseModel):
    user_id: str
    verification_note: str
    date: datetime


class LocalCredibility(BaseModel):
    """How much to trust a contributor's claims about one system."""

    user_id: str
    system_id: str

    indicators: CredibilityIndicators
    expertise_tags: List[str] = []
    verified_by: List[CredibilityVerification] = []

    reputation_score: float = Field(ge=0, le=100)
    trusted_contributor: bool  # can edit without review


# ==========================================
# Reviews
# ==========================================

class Reviewer(BaseModel):
    user_id: str
    display_name: str
    credibility: Optional[LocalCredibility] = None


class ReviewFeedback(BaseModel):
    what_works: List[str] = []
    needs_improvement: List[str] = []
    factual_corrections: List[str] = []


class Review(BaseModel):
    id: str
    content_type: Literal["guide", "route", "media", "trail_info"]
    content_id: str

    reviewer: Reviewer

    accuracy_rating: int = Field(ge=1, le=5)
    completeness_rating: int = Field(ge=1, le=5)
    clarity_rating: int = Field(ge=1, le=5)

    feedback: ReviewFeedback

    personally_verified: bool
    last_ridden_date: Optional[datetime] = None

    created_at: datetime


# ==========================================
# Guides
# ==========================================

class GuideSection(BaseModel):
    heading: str
    content: str  # markdown
    media_refs: List[str] = []


class GuideAuthor(BaseModel):
    user_id: str
    display_name: str
    local_credibility: LocalCredibility


class GuideVersion(BaseModel):
    version: int = Field(ge=1)
    edited_by: str
    edit_summary: str
    timestamp: datetime


class Guide(BaseModel):
    id: str
    type: Literal["system_overview", "route_breakdown", "skill_progression", "seasonal_guide", "visitor_primer"]
    system_id: str
    route_ids: List[str] = []

    title: str
    summary: str
    sections: List[GuideSection] = []

    key_points: List[str] = []
    skill_level_target: Optional[Literal["beginner", "intermediate", "advanced", "all_levels"]] = None

    author: GuideAuthor

    quality_score: float = Field(ge=0, le=100)
    peer_reviews: List[Review] = []
    editorial_status: Literal["draft", "pending_review", "published", "featured"]

    version_history: List[GuideVersion] = []

    created_at: datetime
    updated_at: datetime
    last_verified: datetime


# ==========================================
# Media
# ==========================================

class MediaSubject(BaseModel):
    type: Literal["trail_feature", "viewpoint", "technique_demo", "conditions", "overview"]
    system_id: str
    trail_id: Optional[str] = None
    route_id: Optional[str] = None
    specific_location: Optional[str] = None


class MediaQualityIndicators(BaseModel):
    resolution_ok: bool
    well_lit: bool
    shows_intended_subject: bool
    recent: bool  # taken within the last two years


class Contributor(BaseModel):
    user_id: str
    display_name: str


class MediaVotes(BaseModel):
    helpful: int = Field(ge=0)
    not_helpful: int = Field(ge=0)


class Media(BaseModel):
    id: str
    type: Literal["photo", "video"]

    subject: MediaSubject

    url: str
    thumbnail_url: Optional[str] = None
    title: str
    caption: str

    showcase_notes: Optional[str] = None
    conditions_when_taken: Optional[str] = None

    quality_indicators: MediaQualityIndicators
    contributor: Contributor

    curation_score: float = Field(ge=0, le=100)
    featured: bool
    votes: MediaVotes

    created_at: datetime


# ==========================================
# Rewards
# ==========================================

class Achievement(BaseModel):
    type: Literal["first_guide", "system_expert", "video_creator", "fact_checker", "trail_photographer"]
    system_id: Optional[str] = None
    earned_date: datetime
    details: str


class Perk(BaseModel):
    type: Literal["early_access", "direct_edit", "moderator_tools", "verified_badge"]
    active: bool


class ContributorRewards(BaseModel):
    user_id: str

    total_contributions: int = Field(ge=0)
    quality_contributions: int = Field(ge=0)
    featured_contributions: int = Field(ge=0)

    recognition_level: Literal["contributor", "trusted_contributor", "expert", "ambassador"]

    achievements: List[Achievement] = []
    perks: List[Perk] = []


# ==========================================
# Moderation and fact checking
# ==========================================

class CommunityVotes(BaseModel):
    approve: int = Field(ge=0)
    reject: int = Field(ge=0)
    needs_work: int = Field(ge=0)


class ModerationResolution(BaseModel):
    action: Literal["approved", "rejected", "revised"]
    reason: str
    resolved_by: str
    resolved_at: datetime


class ModerationItem(BaseModel):
    id: str
    content_type: Literal["guide", "route", "media", "edit"]
    content_id: str

    reason: Literal["new_content", "flagged", "major_edit", "dispute"]
    status: Literal["pending", "under_review", "approved", "rejected", "needs_revision"]

    assigned_moderator: Optional[str] = None
    moderator_notes: Optional[str] = None
    community_votes: Optional[CommunityVotes] = None

    resolution: Optional[ModerationResolution] = None

    created_at: datetime


class FactChecker(BaseModel):
    user_id: str
    local_credibility: Optional[LocalCredibility] = None


class Evidence(BaseModel):
    type: Literal["photo", "official_link", "personal_testimony"]
    details: str


class FactCheck(BaseModel):
    id: str
    content_type: Literal["guide", "route", "trail_info"]
    content_id: str

    claim: str
    claim_location: str

    checker: FactChecker

    verification_method: Literal["personal_experience", "local_knowledge", "official_source", "community_consensus"]
    verification_details: str

    result: Literal["verified", "incorrect", "partially_correct", "outdated", "cannot_verify"]
    correct_information: Optional[str] = None

    evidence: Optional[Evidence] = None

    created_at: datetime


# ==========================================
# Seasonal updates
# ==========================================

class UpdateImpact(BaseModel):
    trails: List[str] = []
    routes: List[str] = []
    areas: List[str] = []


class SeasonalUpdate(BaseModel):
    id: str
    system_id: str

    update_type: Literal["conditions", "trail_changes", "new_features", "closures", "events"]

    title: str
    summary: str
    detailed_update: str  # markdown

    relevant_from: datetime
    relevant_until: Optional[datetime] = None

    affects: UpdateImpact = Field(default_factory=UpdateImpact)

    severity: Literal["info", "important", "critical"]

    reported_by: str
    verified_by: List[str] = []
    verification_count: int = Field(ge=0)

    media_evidence: List[str] = []

    created_at: datetime
    last_confirmed: datetime


# ==========================================
# Quality scoring and standards
# ==========================================

class QualityMetrics(BaseModel):
    content_id: str
    content_type: str

    completeness_score: float = Field(ge=0, le=100)
    freshness_score: float = Field(ge=0, le=100)
    media_quality_score: float = Field(ge=0, le=100)

    peer_review_score: float = Field(ge=0, le=100)
    community_votes_score: float = Field(ge=0, le=100)
    fact_check_score: float = Field(ge=0, le=100)

    author_credibility_score: float = Field(ge=0, le=100)
    moderator_boost: Optional[float] = None

    total_quality_score: float = Field(ge=0, le=100)
    quality_tier: Literal["needs_work", "good", "excellent", "featured"]

    last_calculated: datetime


class GuideRequirements(BaseModel):
    min_sections: int = Field(ge=0)
    required_sections: List[str] = []
    min_word_count: int = Field(ge=0)
    requires_media: bool
    requires_local_verification: bool


class PhotoRequirements(BaseModel):
    min_resolution: str  # "1920x1080"
    max_age_years: int = Field(ge=0)
    must_show_clear_subject: bool
    requires_caption: bool


class VideoRequirements(BaseModel):
    max_length_minutes: int = Field(ge=0)
    must_be_relevant: bool
    no_promotional_content: bool
    requires_context: bool


class ContentStandards(BaseModel):
    guide_requirements: GuideRequirements
    photo_requirements: PhotoRequirements
    video_requirements: VideoRequirements

    auto_approve_threshold: float
    feature_threshold: float
    trust_threshold: int
