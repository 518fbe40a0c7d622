"""Run the training targets web application."""
import argparse
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import uvicorn


def main():
    """Start the web server."""
    parser = argparse.ArgumentParser(description="Serve the training targets API")
    parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    parser.add_argument("--port", type=int, default=8000, help="Port")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args()

    print("Starting training targets server...")
    print(f"Trigger a run at http://{args.host}:{args.port}/run")
    print("Press Ctrl+C to stop\n")

    uvicorn.run(
        "web.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
