import json
import sys
from pathlib import Path

# Add the parent directory to sys.path to import from main.py
sys.path.append(str(Path(__file__).parent.parent))

# Import needed modules
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from http import HTTPStatus

from main import GreetingRequest, JSONResponder, hello_world

print("Vercel API hello endpoint loaded")

# Vercel 서버리스 함수용 ASGI 앱
app = FastAPI()

def parse_greeting_request(body: bytes) -> GreetingRequest:
    data = json.loads(body) if body else None
    # 본문이 없거나 null이면 빈 요청으로 처리
    if data is None:
        data = {}
    return GreetingRequest.model_validate(data)

@app.post("/api/hello")
async def hello(request: Request):
    """
    Handler for the hello endpoint
    """
    try:
        greeting_request = parse_greeting_request(await request.body())
    except ValueError as e:
        print(f"[ERROR] Invalid request body: {str(e)}")
        return JSONResponse(
            status_code=HTTPStatus.BAD_REQUEST,
            content={"detail": f"Invalid request body: {str(e)}"}
        )

    try:
        responder = JSONResponder()
        await hello_world(greeting_request, responder)
        return responder.response
    except Exception as e:
        import traceback
        traceback.print_exc()
        return JSONResponse(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            content={"detail": f"Error in hello endpoint: {str(e)}"}
        )
