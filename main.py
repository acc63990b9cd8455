import os
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any, Callable, Dict, Optional, Protocol
from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from dotenv import load_dotenv

# 환경 변수 로드
load_dotenv()

ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "8000"))

FALLBACK_NAME = "World1"

# FastAPI 앱 생성
app = FastAPI()

# 요청 모델
class GreetingPayload(BaseModel):
    name: Optional[Any] = None

class GreetingRequest(BaseModel):
    payload: Optional[GreetingPayload] = None

# 응답 모델
class GreetingResponse(BaseModel):
    success: bool = True
    message: str
    timestamp: str

class ResponseWriter(Protocol):
    def json(self, content: Dict[str, Any]) -> Any:
        ...

class JSONResponder:
    """
    Response writer that renders the emitted body as a JSONResponse.

    The rendered response is kept on `response` so the hosting runtime
    can hand it back to its caller.
    """

    def __init__(self, status_code: int = HTTPStatus.OK):
        self.status_code = status_code
        self.response: Optional[JSONResponse] = None

    def json(self, content: Dict[str, Any]) -> JSONResponse:
        self.response = JSONResponse(status_code=self.status_code, content=content)
        return self.response

def utc_now() -> datetime:
    return datetime.now(timezone.utc)

def format_timestamp(dt: datetime) -> str:
    """
    Format a datetime as ISO-8601 in UTC with millisecond precision

    Example: 2024-01-01T00:00:00.000Z
    """
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

def resolve_name(payload: GreetingPayload) -> Any:
    # 빈 값이면 기본 이름 사용
    return payload.name or FALLBACK_NAME

def build_message(name: Any) -> str:
    return f"Hello {name}!"

async def hello_world(req: GreetingRequest, res: ResponseWriter, clock: Callable[[], datetime] = utc_now) -> None:
    """
    Greet the caller by the name found in the request payload

    Args:
        req: Request carrying an optional payload
        res: Writer the JSON result is emitted through
        clock: Source of the response timestamp
    """
    payload = req.payload or GreetingPayload()
    message = build_message(resolve_name(payload))

    res.json(GreetingResponse(
        success=True,
        message=message,
        timestamp=format_timestamp(clock())
    ).model_dump())

def get_clock() -> Callable[[], datetime]:
    return utc_now

def service_status() -> Dict[str, Any]:
    return {
        "status": "ok",
        "message": "API is running",
        "environment": ENVIRONMENT
    }

@app.get("/")
async def root():
    """
    Liveness check for the API
    """
    return service_status()

@app.post("/api/hello")
async def hello(request: Optional[GreetingRequest] = None, clock: Callable[[], datetime] = Depends(get_clock)):
    """
    Return a greeting for the name in the request payload
    """
    try:
        request = request or GreetingRequest()
        print(f"[START] Greeting request with payload: {request.payload}")

        responder = JSONResponder()
        await hello_world(request, responder, clock=clock)

        print(f"[SUCCESS] Greeting response emitted")
        return responder.response

    except Exception as e:
        print(f"[ERROR] Error in greeting: {str(e)}")
        raise HTTPException(
            status_code=500,
            detail=f"Error processing greeting: {str(e)}"
        )

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=HOST, port=PORT)
