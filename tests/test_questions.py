import pytest

from apps.domains.catalog.models import ExamType, Semester
from apps.domains.questions.models import Question, QuestionStatus
from apps.domains.questions.services.duplicate_checker import QuestionDuplicateChecker

pytestmark = pytest.mark.django_db

INDEX_URL = "/api/v1/questions/"


def detail_url(question_id):
    return f"/api/v1/questions/{question_id}/"


@pytest.fixture
def make_question(department, course):
    counter = {"n": 0}

    def _make(status=QuestionStatus.PUBLISHED, **kwargs):
        counter["n"] += 1
        kwargs.setdefault("department", department)
        kwargs.setdefault("course", course)
        kwargs.setdefault("semester", Semester.objects.create(name=f"Spring {10 + counter['n']}"))
        kwargs.setdefault("exam_type", ExamType.objects.create(name=f"Quiz {counter['n']}"))
        return Question.objects.create(status=status, **kwargs)

    return _make


class TestQuestionIndex:
    def test_only_published_questions_are_listed(self, api_client, question, make_question):
        make_question(status=QuestionStatus.PENDING_REVIEW)
        make_question(status=QuestionStatus.REJECTED)

        resp = api_client.get(INDEX_URL)

        assert resp.status_code == 200
        body = resp.json()
        assert body["count"] == 1
        item = body["results"][0]
        assert item["id"] == question.id
        assert item["department"] == {"id": question.department_id, "name": "Computer Science and Engineering", "short_name": "CSE"}
        assert item["course"] == {"id": question.course_id, "name": "Data Structures"}
        assert item["max_views"] == 0

    def test_newest_first(self, api_client, question, make_question):
        newer = make_question()

        ids = [q["id"] for q in api_client.get(INDEX_URL).json()["results"]]

        assert ids == [newer.id, question.id]

    def test_filters_by_attribute(self, api_client, question, make_question):
        make_question()

        resp = api_client.get(INDEX_URL, {"semester_id": question.semester_id})

        assert [q["id"] for q in resp.json()["results"]] == [question.id]

    def test_unknown_filter_id_is_400(self, api_client, question):
        resp = api_client.get(INDEX_URL, {"department_id": 9999})

        assert resp.status_code == 400
        assert "department_id" in resp.json()["errors"]

    @pytest.mark.parametrize("per_page", ["0", "101", "abc"])
    def test_per_page_bounds(self, api_client, question, per_page):
        resp = api_client.get(INDEX_URL, {"per_page": per_page})

        assert resp.status_code == 400
        assert "per_page" in resp.json()["errors"]

    def test_per_page_paginates(self, api_client, question, make_question):
        make_question()

        body = api_client.get(INDEX_URL, {"per_page": 1}).json()

        assert body["count"] == 2
        assert len(body["results"]) == 1
        assert body["next"] is not None

    def test_max_views_is_highest_submission_views(self, api_client, question, user, other_user, make_submission):
        make_submission(question, user, views=4)
        make_submission(question, other_user, views=11)

        item = api_client.get(INDEX_URL).json()["results"][0]

        assert item["max_views"] == 11

    def test_index_is_cached_and_busted_on_save(self, api_client, question, make_question):
        pending = make_question(status=QuestionStatus.PENDING_REVIEW)
        assert api_client.get(INDEX_URL).json()["count"] == 1

        # queryset.update() skips signals, so the cached page is still served
        Question.objects.filter(pk=pending.pk).update(status=QuestionStatus.PUBLISHED)
        assert api_client.get(INDEX_URL).json()["count"] == 1

        pending.refresh_from_db()
        pending.save()
        assert api_client.get(INDEX_URL).json()["count"] == 2


class TestQuestionDetail:
    def test_unpublished_is_404(self, api_client, make_question):
        pending = make_question(status=QuestionStatus.PENDING_REVIEW)

        resp = api_client.get(detail_url(pending.id))

        assert resp.status_code == 404
        assert resp.json() == {"detail": "Not found."}

    def test_submissions_ordered_by_score(self, api_client, question, make_user, make_submission):
        author_a, author_b, voter_1, voter_2 = (make_user() for _ in range(4))
        low = make_submission(question, author_a, with_pdf=True)
        high = make_submission(question, author_b, with_pdf=True)
        high.upvote(voter_1)
        high.upvote(voter_2)
        low.downvote(voter_1)

        body = api_client.get(detail_url(question.id)).json()

        assert body["title"] == "Data Structures (CSE) Final Fall 23"
        assert [s["id"] for s in body["submissions"]] == [high.id, low.id]
        assert body["submissions"][0]["upvote_count"] == 2
        assert body["submissions"][1]["downvote_count"] == 1
        assert body["submissions"][0]["user"] == {"name": author_b.name, "username": author_b.username}
        assert body["submissions"][0]["pdf_url"].endswith("/paper.pdf")

    def test_detail_cache_is_cleared_by_votes(self, api_client, question, user, other_user, make_submission):
        submission = make_submission(question, user)
        assert api_client.get(detail_url(question.id)).json()["submissions"][0]["upvote_count"] == 0

        submission.upvote(other_user)

        assert api_client.get(detail_url(question.id)).json()["submissions"][0]["upvote_count"] == 1


class TestQuestionModel:
    def test_pdf_url_uses_best_submission(self, question, make_user, make_submission):
        plain = make_submission(question, make_user())
        best = make_submission(question, make_user(), with_pdf=True)
        best.upvote(make_user())

        assert question.pdf_url == best.pdf_url
        assert plain.pdf_url is None

    def test_pdf_url_without_submissions(self, question):
        assert question.pdf_url is None

    def test_send_to_review(self, question):
        question.send_to_review("multiple_user_reports")

        question.refresh_from_db()
        assert question.status == QuestionStatus.PENDING_REVIEW
        assert question.under_review_reason == "multiple_user_reports"

    def test_publish_clears_review_reason(self, question):
        question.send_to_review("new_user")
        question.publish()

        question.refresh_from_db()
        assert question.is_published
        assert question.under_review_reason is None


class TestDuplicateChecker:
    def test_finds_other_published_question(self, question):
        attrs = question.attributes()

        assert QuestionDuplicateChecker().check(attrs) == question
        assert QuestionDuplicateChecker().check(attrs, current_question_id=question.id) is None

    def test_ignores_unpublished(self, question):
        question.reject()

        assert QuestionDuplicateChecker().check(question.attributes()) is None
