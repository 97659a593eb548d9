import pytest
from fastapi.testclient import TestClient

from screener.main import app
from screener.services import session_store


JANE_RESUME = """\
Jane Doe
jane.doe@example.com

Skills: Python, SQL
Docker

Experience
Senior Developer at Acme Corp 2019-2023
Software Engineer at Initech 2016 - present

Education
Bachelor of Science in Computer Science, Ohio State University
"""


@pytest.fixture
def jane_resume():
    return JANE_RESUME


@pytest.fixture
def vocabulary():
    return ("python", "sql", "docker", "java", "excel", "aws")


@pytest.fixture
def client():
    session_store.clear_sessions()
    with TestClient(app) as c:
        yield c
    session_store.clear_sessions()
