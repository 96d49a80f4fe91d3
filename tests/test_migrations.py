from pathlib import Path
import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect
from sqlalchemy.exc import OperationalError

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


@pytest.fixture(name="database_url")
def database_url_fixture(tmp_path):
    return f"sqlite:///{tmp_path / 'migrations.db'}"


@pytest.fixture(name="alembic_config")
def alembic_config_fixture(database_url):
    config = Config(str(ALEMBIC_INI))
    config.set_main_option("sqlalchemy.url", database_url)
    config.attributes["configure_logger"] = False
    return config


@pytest.fixture(name="engine")
def engine_fixture(database_url):
    engine = create_engine(database_url)
    yield engine
    engine.dispose()


def test_upgrade_creates_people_table(alembic_config, engine):
    command.upgrade(alembic_config, "head")

    inspector = inspect(engine)
    assert "people" in inspector.get_table_names()
    columns = {c["name"] for c in inspector.get_columns("people")}
    assert columns == {"id", "name", "hobby"}
    assert inspector.get_pk_constraint("people")["constrained_columns"] == ["id"]
    unique_columns = [u["column_names"] for u in inspector.get_unique_constraints("people")]
    assert ["name"] in unique_columns


def test_downgrade_drops_people_table(alembic_config, engine):
    command.upgrade(alembic_config, "head")
    command.downgrade(alembic_config, "base")

    assert "people" not in inspect(engine).get_table_names()


def test_upgrade_fails_when_table_exists(alembic_config):
    command.upgrade(alembic_config, "head")
    command.stamp(alembic_config, "base")

    with pytest.raises(OperationalError):
        command.upgrade(alembic_config, "head")


def test_downgrade_fails_when_table_missing(alembic_config, engine):
    command.upgrade(alembic_config, "head")
    with engine.begin() as connection:
        connection.exec_driver_sql("DROP TABLE people")

    with pytest.raises(OperationalError):
        command.downgrade(alembic_config, "base")
