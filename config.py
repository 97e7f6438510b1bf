import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass
class Settings:
    # Uygulama Ayarları
    app_name: str = os.getenv("APP_NAME", "Library Lending")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "WARNING").upper()

    # CLI Ayarları
    # İzin verilen değerler: 'plain' (default), 'json', 'rich'
    default_output_mode: str = os.getenv("LIB_CLI_OUTPUT", "plain").lower()

    # Kimlik Ayarları
    book_id_prefix: str = os.getenv("BOOK_ID_PREFIX", "book")
    person_id_start: int = int(os.getenv("PERSON_ID_START", "1"))


settings = Settings()
