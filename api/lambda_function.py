import sys
from pathlib import Path

# Add the parent directory to sys.path to import from main.py
sys.path.append(str(Path(__file__).parent.parent))

from mangum import Mangum

from main import app

# AWS Lambda / API Gateway 핸들러
handler = Mangum(app, lifespan="off")
