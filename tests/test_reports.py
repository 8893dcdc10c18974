import pytest
from django.core import mail

from apps.domains.catalog.models import ExamType
from apps.domains.questions.models import Question, QuestionStatus, UnderReviewReason
from apps.domains.reports.models import UserReport, UserReportType
from apps.domains.reports.services.report_service import (
    create_report,
    publish_reported_question,
    reject_reported_question,
)

pytestmark = pytest.mark.django_db


def reports_url(question_id):
    return f"/api/v1/questions/{question_id}/reports/"


class TestReportEndpoint:
    def test_creates_report(self, auth_client, question, user):
        resp = auth_client.post(
            reports_url(question.id),
            {"type": UserReportType.WRONG_INFO_GIVEN_ABOUT_QUESTION, "details": "This is the midterm."},
            format="json",
        )

        assert resp.status_code == 201
        body = resp.json()
        assert body["type"] == "wrong_info_given_about_question"
        assert body["reviewed"] is False
        report = UserReport.objects.get()
        assert report.user == user
        assert report.question == question

    def test_unknown_type(self, auth_client, question):
        resp = auth_client.post(reports_url(question.id), {"type": "spam"}, format="json")

        assert resp.status_code == 400
        assert "type" in resp.json()["errors"]

    def test_unknown_question(self, auth_client):
        resp = auth_client.post(reports_url(9999), {"type": "other"}, format="json")
        assert resp.status_code == 404

    def test_requires_authentication(self, api_client, question):
        resp = api_client.post(reports_url(question.id), {"type": "other"}, format="json")
        assert resp.status_code == 401

    def test_admins_are_notified(self, auth_client, question, django_capture_on_commit_callbacks):
        with django_capture_on_commit_callbacks(execute=True):
            auth_client.post(reports_url(question.id), {"type": "other", "details": "broken pdf"}, format="json")

        assert len(mail.outbox) == 1
        message = mail.outbox[0]
        assert f"New report on question #{question.id}" in message.subject
        assert "broken pdf" in message.body
        assert message.to == ["admin@example.com"]


class TestReviewThreshold:
    def test_question_goes_to_review_at_threshold(self, question, make_user, settings):
        settings.REPORT_REVIEW_THRESHOLD = 3

        for _ in range(2):
            create_report(user=make_user(), question=question, report_type=UserReportType.OTHER)
        question.refresh_from_db()
        assert question.status == QuestionStatus.PUBLISHED

        create_report(user=make_user(), question=question, report_type=UserReportType.OTHER)
        question.refresh_from_db()
        assert question.status == QuestionStatus.PENDING_REVIEW
        assert question.under_review_reason == UnderReviewReason.MULTIPLE_USER_REPORTS

    def test_reviewed_reports_do_not_count(self, question, make_user, settings):
        settings.REPORT_REVIEW_THRESHOLD = 2
        old = create_report(user=make_user(), question=question, report_type=UserReportType.OTHER)
        old.mark_reviewed()

        create_report(user=make_user(), question=question, report_type=UserReportType.OTHER)

        question.refresh_from_db()
        assert question.status == QuestionStatus.PUBLISHED

    def test_unpublished_question_keeps_its_status(self, question, make_user, settings):
        settings.REPORT_REVIEW_THRESHOLD = 1
        question.reject()

        create_report(user=make_user(), question=question, report_type=UserReportType.OTHER)

        question.refresh_from_db()
        assert question.status == QuestionStatus.REJECTED


class TestModerationActions:
    def test_publish_marks_report_reviewed(self, question, user):
        question.send_to_review(UnderReviewReason.MULTIPLE_USER_REPORTS)
        report = UserReport.objects.create(user=user, question=question, type=UserReportType.OTHER)

        publish_reported_question(report)

        question.refresh_from_db()
        report.refresh_from_db()
        assert question.status == QuestionStatus.PUBLISHED
        assert report.reviewed is True

    def test_reject_marks_report_reviewed(self, question, user):
        report = UserReport.objects.create(user=user, question=question, type=UserReportType.INAPPROPRIATE_PDF_FOR_COMMUNITY)

        reject_reported_question(report)

        question.refresh_from_db()
        report.refresh_from_db()
        assert question.status == QuestionStatus.REJECTED
        assert report.reviewed is True

    def test_publish_closes_every_open_report_on_the_question(self, question, make_user, settings):
        settings.REPORT_REVIEW_THRESHOLD = 3
        reports = [
            create_report(user=make_user(), question=question, report_type=UserReportType.OTHER)
            for _ in range(3)
        ]
        question.refresh_from_db()
        assert question.status == QuestionStatus.PENDING_REVIEW

        publish_reported_question(reports[0])

        assert not UserReport.objects.unreviewed().filter(question=question).exists()

        # a fresh report starts counting from zero again
        create_report(user=make_user(), question=question, report_type=UserReportType.OTHER)
        question.refresh_from_db()
        assert question.status == QuestionStatus.PUBLISHED

    def test_reject_leaves_other_questions_reports_open(self, question, make_user):
        other = Question.objects.create(
            department=question.department,
            course=question.course,
            semester=question.semester,
            exam_type=ExamType.objects.create(name="Midterm"),
            status=QuestionStatus.PUBLISHED,
        )
        report = create_report(user=make_user(), question=question, report_type=UserReportType.OTHER)
        create_report(user=make_user(), question=question, report_type=UserReportType.OTHER)
        untouched = create_report(user=make_user(), question=other, report_type=UserReportType.OTHER)

        reject_reported_question(report)

        assert not UserReport.objects.unreviewed().filter(question=question).exists()
        untouched.refresh_from_db()
        assert untouched.reviewed is False
