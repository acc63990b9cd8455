import sys
from pathlib import Path

# Add the parent directory to sys.path to import from main.py
sys.path.append(str(Path(__file__).parent.parent))

from fastapi import FastAPI

from main import service_status

print("Vercel API root endpoint loaded")

app = FastAPI()

@app.get("/api/root")
def root():
    """
    Handler for the root endpoint
    """
    return service_status()
