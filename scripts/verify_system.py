import asyncio
import sys

from jobly.core.config import settings
from jobly.core.database import Database
from jobly.infrastructure.persistence.repositories import JobRepository


async def verify_system():
    print("Verifying system configuration...")

    # Check Settings
    print(f"[-] Environment: {settings.ENVIRONMENT}")
    print(f"[-] Database URL found: {'Yes' if settings.DATABASE_URL else 'No'}")

    db = Database.from_settings(settings)
    try:
        # Check Database Connection
        if not await db.health_check():
            print("[!] Database connection failed")
            return False
        print("[+] Database connection successful!")

        jobs = await JobRepository(db).find_all()
        print(f"[+] jobs table readable ({len(jobs)} rows)")
    finally:
        await db.close()

    print("[+] System is ready for startup.")
    return True

if __name__ == "__main__":
    if not asyncio.run(verify_system()):
        sys.exit(1)
