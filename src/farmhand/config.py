import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load the appropriate .env file on module import
env = os.environ.get("FARMHAND_ENV", "development").lower()
env_file = f".env.{env}"
if os.path.exists(env_file):
    load_dotenv(env_file)
else:
    # Fall back to the default .env file
    load_dotenv()


@dataclass
class Config:
    environment: str
    data_file: Path
    log_level: str
    admin_username: str
    admin_password: str
    farmer_username: str
    farmer_password: str

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            environment=env,
            data_file=Path(os.environ.get("FARMHAND_DATA_FILE", "animals.txt")),
            log_level=os.environ.get("FARMHAND_LOG_LEVEL", "WARNING").upper(),
            admin_username=os.environ.get("FARMHAND_ADMIN_USERNAME", "admin"),
            admin_password=os.environ.get("FARMHAND_ADMIN_PASSWORD", "admin123"),
            farmer_username=os.environ.get("FARMHAND_FARMER_USERNAME", "farmer1"),
            farmer_password=os.environ.get("FARMHAND_FARMER_PASSWORD", "farmer123"),
        )


config = Config.from_env()
