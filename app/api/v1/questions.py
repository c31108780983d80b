from fastapi import APIRouter, Depends

from app.api.v1.errors import http_errors
from app.api.v1.schemas import (
    AnswerRequestSchema,
    AnswerResponseSchema,
    AnswerResultSchema,
    DailyQuestionsSchema,
    MemorySchema,
    ProgressResponseSchema,
    ProgressSchema,
    QuestionListSchema,
    QuestionSchema,
    QuestionsCreatedSchema,
)
from app.application.use_cases.daily_questions import GetDailyQuestionsUseCase
from app.application.use_cases.generate_questions import GenerateQuestionsUseCase
from app.application.use_cases.submit_answer import SubmitAnswerUseCase
from app.application.use_cases.user_progress import GetUserProgressUseCase
from app.domain.entities.user import User
from app.wiring.dependencies import (
    get_current_user,
    get_daily_use_case,
    get_generate_use_case,
    get_progress_use_case,
    get_submit_answer_use_case,
)

router = APIRouter()


@router.post("/generate/{memory_id}", response_model=QuestionsCreatedSchema, status_code=201)
def generate_questions(
    memory_id: str,
    _: User = Depends(get_current_user),
    uc: GenerateQuestionsUseCase = Depends(get_generate_use_case),
):
    with http_errors():
        questions = uc.execute(memory_id)
    return QuestionsCreatedSchema(
        message="Questions generated successfully",
        questions=[QuestionSchema.from_question(q) for q in questions],
    )


@router.get("/memory/{memory_id}", response_model=QuestionListSchema)
def get_memory_questions(
    memory_id: str,
    _: User = Depends(get_current_user),
    uc: GenerateQuestionsUseCase = Depends(get_generate_use_case),
):
    questions = uc.list_for_memory(memory_id)
    return QuestionListSchema(questions=[QuestionSchema.from_question(q) for q in questions])


@router.get("/daily", response_model=DailyQuestionsSchema)
def get_daily_questions(
    user: User = Depends(get_current_user),
    uc: GetDailyQuestionsUseCase = Depends(get_daily_use_case),
):
    with http_errors():
        daily = uc.execute(user.id)

    if daily.needs_questions:
        return DailyQuestionsSchema(
            message="No questions available yet. Need to generate questions for this memory.",
            memory=MemorySchema.from_view(daily.memory),
            needs_questions=True,
        )
    return DailyQuestionsSchema(
        memory=MemorySchema.from_view(daily.memory),
        questions=[QuestionSchema.from_question(q) for q in daily.questions],
    )


@router.post("/answer/{question_id}", response_model=AnswerResponseSchema)
def submit_answer(
    question_id: str,
    req: AnswerRequestSchema,
    user: User = Depends(get_current_user),
    uc: SubmitAnswerUseCase = Depends(get_submit_answer_use_case),
):
    with http_errors():
        submitted = uc.execute(user_id=user.id, question_id=question_id, answer=req.answer)

    result = submitted.result
    return AnswerResponseSchema(
        message="Correct answer!" if result.is_correct else "Incorrect answer",
        result=AnswerResultSchema(
            is_correct=result.is_correct,
            points=result.points_awarded,
            correct_answer=submitted.correct_answer,
            match_ratio=result.match_ratio,
        ),
    )


@router.get("/progress", response_model=ProgressResponseSchema)
def get_progress(
    user: User = Depends(get_current_user),
    uc: GetUserProgressUseCase = Depends(get_progress_use_case),
):
    progress = uc.execute(user.id)
    return ProgressResponseSchema(
        progress=ProgressSchema(
            correct_answers=progress.correct_answers,
            total_answers=progress.total_answers,
            accuracy_rate=progress.accuracy_rate,
            total_points=progress.total_points,
        )
    )
