#!/usr/bin/env python3
"""
Skylight Backend - Run Script
This script starts the FastAPI backend server
"""

import os
import sys
import subprocess
from pathlib import Path

from dotenv import dotenv_values

def print_colored(message, color="blue"):
    """Print colored output"""
    colors = {
        "red": "\033[91m",
        "green": "\033[92m",
        "yellow": "\033[93m",
        "blue": "\033[94m",
        "reset": "\033[0m"
    }
    print(f"{colors.get(color, '')}{message}{colors['reset']}")

def check_file_exists(filepath, error_message):
    """Check if a file exists"""
    if not Path(filepath).exists():
        print_colored(f"❌ Error: {error_message}", "red")
        sys.exit(1)

def api_key_configured(env_files=(Path(".env"), Path("../.env")), name="SUNSETHUE_API_KEY"):
    """Check the environment, then each .env file, for a non-empty API key"""
    if os.environ.get(name):
        return True
    return any(dotenv_values(path).get(name) for path in env_files if path.exists())

def main():
    print_colored("🚀 Starting Skylight Backend...", "blue")

    # Check if we're in the backend directory
    check_file_exists("app/main.py", "app/main.py not found. Please run this script from the backend directory.")

    # The server starts without a key, but every /sunrise call will answer 500
    if not api_key_configured():
        print_colored("⚠️  Warning: SUNSETHUE_API_KEY is not set.", "yellow")
        print("Export it or add it to a .env file in the project root:")
        print("  SUNSETHUE_API_KEY=your_api_key_here")
        print("  LOGGER=20")

    # Check if dependencies are installed
    print_colored("🔍 Checking dependencies...", "blue")
    try:
        import fastapi
        import uvicorn
    except ImportError:
        print_colored("❌ Dependencies not installed.", "red")
        print("Install them from the project root with:")
        print("  pip install -e .")
        sys.exit(1)

    # Start the server
    print_colored("✅ All checks passed!", "green")
    print_colored("🌐 Starting Uvicorn server...", "blue")
    print("📍 Backend will be available at: http://localhost:8000")
    print("📍 Sunrise endpoint: http://localhost:8000/sunrise?lat=40.7&lon=-74")
    print("📍 API Documentation: http://localhost:8000/docs")
    print()
    print("Press Ctrl+C to stop the server")
    print()

    # Run uvicorn with auto-reload for development
    try:
        subprocess.run([
            sys.executable, "-m", "uvicorn",
            "app.main:app",
            "--reload",
            "--host", "0.0.0.0",
            "--port", "8000"
        ], check=True)
    except KeyboardInterrupt:
        print_colored("\n👋 Backend server stopped.", "yellow")
    except subprocess.CalledProcessError as e:
        print_colored(f"\n❌ Error starting server: {e}", "red")
        sys.exit(1)

if __name__ == "__main__":
    main()
