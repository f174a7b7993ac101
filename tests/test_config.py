from backend.app.config import Settings


def test_database_url_wins():
    s = Settings(DATABASE_URL="sqlite:////tmp/x.db", storage_backend="postgres")
    assert s.get_db_url() == "sqlite:////tmp/x.db"


def test_sqlite_backend_url():
    s = Settings(DATABASE_URL="", storage_backend="sqlite", sqlite_path="./data.db")
    assert s.get_db_url() == "sqlite:///./data.db"


def test_postgres_backend_url():
    s = Settings(
        DATABASE_URL="",
        storage_backend="postgres",
        postgres_user="u",
        postgres_password="p",
        postgres_host="db",
        postgres_port=5433,
        postgres_db="inv",
    )
    assert s.get_db_url() == "postgresql://u:p@db:5433/inv"


def test_cors_origins_split():
    s = Settings(cors_origins="https://a.example, https://b.example")
    assert s.get_cors_origins() == ["https://a.example", "https://b.example"]
