from pydantic import BaseModel, Field

class SignupRequest(BaseModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)

class LoginRequest(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)

class LoginResponse(BaseModel):
    token: str
    email: str
    name: str

class MessageResponse(BaseModel):
    message: str
