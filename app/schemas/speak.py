# app/schemas/speak.py
from pydantic import BaseModel, Field

class SpeakMatchReq(BaseModel):
    transcription: str = ""
    letter: str = Field(..., min_length=1, max_length=1, examples=["B"])

class SpeakMatchRes(BaseModel):
    letter: str
    normalized: str
    matched: bool
    points_awarded: int = 0
