from fastapi import FastAPI

from gradewise.api.exceptions.handlers import register_exception_handlers
from gradewise.api.routes.grades import router as grades_router
from gradewise.settings import settings


app = FastAPI(title="GradeWise", version=settings.API_VERSION, debug=settings.DEBUG)

register_exception_handlers(app)


@app.get("/health")
async def health_check():
    return {"status": "healthy"}

app.include_router(grades_router)
