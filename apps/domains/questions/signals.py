# PATH: apps/domains/questions/signals.py
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from apps.domains.questions.models import Question, Submission, Vote
from apps.domains.questions.services.question_cache import QuestionCacheService


@receiver(post_save, sender=Question)
@receiver(post_delete, sender=Question)
def question_changed(sender, instance, **kwargs):
    QuestionCacheService().clear_question_cache(instance.pk)


@receiver(post_save, sender=Submission)
@receiver(post_delete, sender=Submission)
def submission_changed(sender, instance, **kwargs):
    QuestionCacheService().clear_question_cache(instance.question_id)


@receiver(post_save, sender=Vote)
@receiver(post_delete, sender=Vote)
def vote_changed(sender, instance, **kwargs):
    question_id = Submission.objects.filter(pk=instance.submission_id).values_list("question_id", flat=True).first()
    QuestionCacheService().clear_question_cache(question_id)
