"""Run the API and the Streamlit app from project root. Use: python run_app.py"""
import os
import subprocess
import sys

root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, root)
from hopeful_futures import config  # noqa: E402

api = subprocess.Popen(
    [sys.executable, "-m", "uvicorn", "hopeful_futures.api:app", "--host", config.API_HOST, "--port", str(config.API_PORT)],
    cwd=root,
)
try:
    subprocess.run(
        [sys.executable, "-m", "streamlit", "run", os.path.join(root, "hopeful_futures", "app.py")],
        cwd=root,
        check=True,
    )
finally:
    api.terminate()
    api.wait()
