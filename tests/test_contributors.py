import pytest

from apps.domains.catalog.models import Semester
from apps.domains.questions.models import Question, QuestionStatus

pytestmark = pytest.mark.django_db

CONTRIBUTORS_URL = "/api/v1/contributors/"
STATS_URL = "/api/v1/stats/"


@pytest.fixture
def pending_question(question):
    return Question.objects.create(
        department=question.department,
        course=question.course,
        semester=Semester.objects.create(name="Spring 24"),
        exam_type=question.exam_type,
        status=QuestionStatus.PENDING_REVIEW,
    )


class TestContributorList:
    def test_only_users_with_submissions_most_first(self, api_client, question, pending_question, user, other_user, make_user, make_submission):
        make_user(username="lurker")
        make_submission(question, user, views=5)
        make_submission(pending_question, user, views=1)
        make_submission(question, other_user, views=40)

        body = api_client.get(CONTRIBUTORS_URL).json()

        assert body["count"] == 2
        first, second = body["results"]
        assert first["username"] == "alice"
        assert first["submissions_count"] == 2
        assert first["total_views"] == 6
        assert second == {
            "name": "Bob",
            "username": "bob",
            "avatar_url": None,
            "submissions_count": 1,
            "total_views": 40,
        }

    def test_page_size_is_fixed(self, api_client, question, make_user, make_submission):
        for _ in range(13):
            make_submission(question, make_user())

        body = api_client.get(CONTRIBUTORS_URL, {"per_page": 50}).json()

        assert body["count"] == 13
        assert len(body["results"]) == 12


class TestContributorDetail:
    def test_public_profile_shows_published_only(self, api_client, question, pending_question, user, make_submission):
        make_submission(question, user)
        make_submission(pending_question, user)

        body = api_client.get(f"{CONTRIBUTORS_URL}{user.username}/").json()

        assert body["contributor"]["submissions_count"] == 2
        assert [q["id"] for q in body["questions"]["results"]] == [question.id]

    def test_own_profile_shows_every_status(self, auth_client, question, pending_question, user, make_submission):
        make_submission(question, user)
        make_submission(pending_question, user)

        body = auth_client.get(f"{CONTRIBUTORS_URL}{user.username}/").json()

        results = body["questions"]["results"]
        assert {q["id"] for q in results} == {question.id, pending_question.id}
        assert {q["status"] for q in results} == {"published", "pending_review"}

    def test_unknown_user(self, api_client):
        assert api_client.get(f"{CONTRIBUTORS_URL}nobody/").status_code == 404


class TestStats:
    def test_counts(self, api_client, question, pending_question, user, make_submission):
        make_submission(question, user)

        body = api_client.get(STATS_URL).json()

        assert body["questions"] == 1
        assert body["departments"] == 1
        assert body["courses"] == 1
        assert body["semesters"] == 2
        assert body["exam_types"] == 1
        assert body["users"] == 1
        assert body["contributors"] == 1
        # the request itself is tracked as an online guest
        assert body["online_users"] == 1
