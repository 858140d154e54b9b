# backend/run.py
import sys
import uvicorn
from ledger.config import settings

def main():
    try:
        uvicorn.run(
            "ledger.main:app",
            host=settings.HOST,
            port=settings.PORT,
            reload=settings.RELOAD
        )
    except Exception as e:
        print(f"Error starting the server: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
