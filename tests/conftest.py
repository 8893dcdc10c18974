# PATH: tests/conftest.py
from io import BytesIO

import pytest
from django.core.cache import cache
from django.core.files.uploadedfile import SimpleUploadedFile
from reportlab.pdfgen import canvas
from rest_framework.test import APIClient

from apps.core.models import User
from apps.domains.catalog.models import Course, Department, ExamType, Semester
from apps.domains.questions.models import Question, QuestionStatus, Submission


@pytest.fixture(autouse=True)
def _clear_cache():
    cache.clear()
    yield
    cache.clear()


def make_pdf_bytes(pages: int = 1, size=(595.28, 841.89)) -> bytes:
    buf = BytesIO()
    c = canvas.Canvas(buf, pagesize=size)
    for n in range(pages):
        c.drawString(72, 72, f"page {n + 1}")
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture
def pdf_bytes():
    return make_pdf_bytes()


@pytest.fixture
def pdf_upload(pdf_bytes):
    def _make(name="paper.pdf"):
        return SimpleUploadedFile(name, pdf_bytes, content_type="application/pdf")
    return _make


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_user(db):
    counter = {"n": 0}

    def _make(**kwargs):
        counter["n"] += 1
        n = counter["n"]
        username = kwargs.pop("username", f"student{n}")
        email = kwargs.pop("email", f"{username}@example.com")
        password = kwargs.pop("password", "secret-pass-123")
        kwargs.setdefault("name", f"Student {n}")
        return User.objects.create_user(username=username, email=email, password=password, **kwargs)

    return _make


@pytest.fixture
def user(make_user):
    return make_user(username="alice", name="Alice")


@pytest.fixture
def other_user(make_user):
    return make_user(username="bob", name="Bob")


@pytest.fixture
def auth_client(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def client_for():
    def _client(u):
        client = APIClient()
        client.force_authenticate(user=u)
        return client
    return _client


# ------------------------------------
# catalog
# ------------------------------------

@pytest.fixture
def department(db):
    return Department.objects.create(name="Computer Science and Engineering", short_name="CSE")


@pytest.fixture
def other_department(db):
    return Department.objects.create(name="Electrical and Electronic Engineering", short_name="EEE")


@pytest.fixture
def course(department):
    return Course.objects.create(department=department, name="Data Structures")


@pytest.fixture
def semester(db):
    return Semester.objects.create(name="Fall 23")


@pytest.fixture
def exam_type(db):
    return ExamType.objects.create(name="Final")


@pytest.fixture
def question(department, course, semester, exam_type):
    return Question.objects.create(
        department=department,
        course=course,
        semester=semester,
        exam_type=exam_type,
        status=QuestionStatus.PUBLISHED,
    )


@pytest.fixture
def make_submission(pdf_upload):
    def _make(question, user, *, with_pdf=False, views=0):
        submission = Submission.objects.create(question=question, user=user, views=views)
        if with_pdf:
            submission.replace_pdf(pdf_upload())
        return submission
    return _make
