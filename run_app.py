"""Run Streamlit app from project root. Use: python run_app.py"""
import os
import subprocess
import sys

root = os.path.dirname(os.path.abspath(__file__))
env = dict(os.environ, PYTHONPATH=os.pathsep.join(filter(None, [root, os.environ.get("PYTHONPATH")])))
app_path = os.path.join(root, "resume_tailor", "app.py")
subprocess.run([sys.executable, "-m", "streamlit", "run", app_path], check=True, cwd=root, env=env)
