from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities.memory import MemoryView
from app.domain.entities.question import Question
from app.domain.entities.user import User


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# requests


class RegisterRequestSchema(BaseModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    password: str | None = None


class LoginRequestSchema(BaseModel):
    email: str | None = None
    password: str | None = None


class ContributorRequestSchema(CamelModel):
    name: str | None = None
    email: str | None = None
    relationship_type: str | None = Field(None, alias="relationshipType")
    relationship_years: int | float | str | None = Field(None, alias="relationshipYears")
    user_id: str | None = Field(None, alias="userId")


class MemoryRequestSchema(CamelModel):
    contributor_id: str | None = Field(None, alias="contributorId")
    photo_url: str | None = Field(None, alias="photoUrl")
    description: str | None = None
    event_date: str | None = Field(None, alias="eventDate")


class AnswerRequestSchema(BaseModel):
    answer: str | None = None


# responses


class UserSchema(BaseModel):
    id: str
    name: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> "UserSchema":
        return cls(id=user.id, name=user.name, email=user.email)


class UserDetailSchema(UserSchema):
    phone: str | None = None
    created_at: str | None = None

    @classmethod
    def from_user(cls, user: User) -> "UserDetailSchema":
        return cls(id=user.id, name=user.name, email=user.email, phone=user.phone, created_at=user.created_at)


class AuthResponseSchema(BaseModel):
    message: str
    user: UserSchema
    token: str


class MessageSchema(BaseModel):
    message: str


class TokenResponseSchema(BaseModel):
    message: str
    token: str


class VerifiedUserResponseSchema(BaseModel):
    message: str
    user: UserSchema


class CurrentUserResponseSchema(BaseModel):
    user: UserDetailSchema


class ContributorCreatedSchema(BaseModel):
    message: str
    id: str


class PhotoUploadedSchema(CamelModel):
    message: str
    photo_url: str = Field(alias="photoUrl")


class MemoryContributorSchema(BaseModel):
    name: str
    relationship_type: str
    user_id: str


class MemorySchema(BaseModel):
    id: str
    photo_url: str
    description: str
    event_date: str | None = None
    created_at: str | None = None
    contributor_id: str
    memory_contributors: MemoryContributorSchema | None = None

    @classmethod
    def from_view(cls, view: MemoryView) -> "MemorySchema":
        m = view.memory
        return cls(
            id=m.id,
            photo_url=m.photo_url,
            description=m.description,
            event_date=m.event_date,
            created_at=m.created_at,
            contributor_id=m.contributor_id,
            memory_contributors=MemoryContributorSchema(
                name=view.contributor_name,
                relationship_type=view.relationship_type,
                user_id=view.user_id,
            ),
        )


class MemoryCreatedSchema(BaseModel):
    message: str
    memory: MemorySchema


class MemoryResponseSchema(BaseModel):
    memory: MemorySchema


class MemoryListSchema(BaseModel):
    memories: list[MemorySchema]


class QuestionSchema(BaseModel):
    id: str
    memory_id: str
    question: str
    correct_answer: str
    points: int
    difficulty: int | None = None

    @classmethod
    def from_question(cls, q: Question) -> "QuestionSchema":
        return cls(
            id=q.id,
            memory_id=q.memory_id,
            question=q.question,
            correct_answer=q.correct_answer,
            points=q.points,
            difficulty=q.difficulty,
        )


class QuestionsCreatedSchema(BaseModel):
    message: str
    questions: list[QuestionSchema]


class QuestionListSchema(BaseModel):
    questions: list[QuestionSchema]


class DailyQuestionsSchema(CamelModel):
    message: str | None = None
    memory: MemorySchema
    questions: list[QuestionSchema] = Field(default_factory=list)
    needs_questions: bool = Field(False, alias="needsQuestions")


class AnswerResultSchema(CamelModel):
    is_correct: bool = Field(alias="isCorrect")
    points: int
    correct_answer: str = Field(alias="correctAnswer")
    match_ratio: float = Field(alias="matchRatio")


class AnswerResponseSchema(BaseModel):
    message: str
    result: AnswerResultSchema


class ProgressSchema(CamelModel):
    correct_answers: int = Field(alias="correctAnswers")
    total_answers: int = Field(alias="totalAnswers")
    accuracy_rate: str = Field(alias="accuracyRate")
    total_points: int = Field(alias="totalPoints")


class ProgressResponseSchema(BaseModel):
    progress: ProgressSchema
