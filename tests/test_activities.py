from datetime import date

import pytest

from taskmanager.errors import DuplicateTitleError, InvalidFrequencyError, NotFoundError, ValidationError
from taskmanager.models import Frequency
from taskmanager.services import activities, progress, users


@pytest.fixture
def other_user(app):
    return users.register("Bia", "bia@x.com", "secret123")


def test_create_activity(activity, user):
    assert activity.title == "Run"
    assert activity.frequency is Frequency.DAILY
    assert activity.active is True
    assert activity.user_id == user.id


def test_frequency_is_case_insensitive(user):
    created = activities.create(user.id, "Swim", "Pool", "mOnThLy", date(2024, 1, 1))
    assert created.frequency is Frequency.MONTHLY


@pytest.mark.parametrize("value", ["dailyweekly", "", "yearly", None, 3])
def test_invalid_frequency(user, value):
    with pytest.raises(InvalidFrequencyError):
        activities.create(user.id, "Swim", "Pool", value, date(2024, 1, 1))


def test_create_for_unknown_user(app):
    with pytest.raises(NotFoundError):
        activities.create(999, "Run", "Morning run", "DAILY", date(2024, 1, 1))


@pytest.mark.parametrize("title", ["run", "RUN", "Ru", "Running", "Morning Run"])
def test_similar_title_conflicts(activity, user, title):
    with pytest.raises(DuplicateTitleError):
        activities.create(user.id, title, "Another", "WEEKLY", date(2024, 1, 1))


def test_same_title_for_other_user_is_allowed(activity, other_user):
    created = activities.create(other_user.id, "Run", "Evening run", "DAILY", date(2024, 1, 1))
    assert created.user_id == other_user.id


def test_inactive_titles_do_not_block(activity, user):
    activities.soft_delete(activity.id, user.id)
    created = activities.create(user.id, "Run", "Fresh start", "DAILY", date(2024, 2, 1))
    assert created.id != activity.id


def test_title_and_description_limits(user):
    with pytest.raises(ValidationError):
        activities.create(user.id, "x" * 101, "desc", "DAILY", date(2024, 1, 1))
    with pytest.raises(ValidationError):
        activities.create(user.id, "Walk", "d" * 256, "DAILY", date(2024, 1, 1))
    with pytest.raises(ValidationError):
        activities.create(user.id, "  ", "desc", "DAILY", date(2024, 1, 1))
    with pytest.raises(ValidationError):
        activities.create(user.id, "Walk", "desc", "DAILY", None)
    assert activities.create(user.id, "x" * 100, "d" * 255, "DAILY", date(2024, 1, 1)).id


def test_get_is_scoped_to_owner(activity, other_user):
    with pytest.raises(NotFoundError) as foreign:
        activities.get(activity.id, other_user.id)
    with pytest.raises(NotFoundError) as missing:
        activities.get(12345, other_user.id)
    assert foreign.value.to_dict() == missing.value.to_dict()


def test_update_partial(activity, user):
    updated = activities.update(activity.id, user.id, description="Evening run", frequency="weekly")
    assert updated.title == "Run"
    assert updated.description == "Evening run"
    assert updated.frequency is Frequency.WEEKLY
    assert updated.start_date == date(2024, 1, 1)


def test_update_other_users_activity(activity, other_user):
    with pytest.raises(NotFoundError):
        activities.update(activity.id, other_user.id, title="Stolen")


def test_update_rejects_bad_frequency(activity, user):
    with pytest.raises(InvalidFrequencyError):
        activities.update(activity.id, user.id, frequency="hourly")


def test_soft_delete_keeps_history(activity, user):
    progress.record_completion(activity.id, date(2024, 1, 2))
    activities.soft_delete(activity.id, user.id)
    assert activities.list_active(user.id) == []
    assert activities.get(activity.id, user.id).active is False
    assert len(progress.list_for_activity(activity.id)) == 1


def test_soft_delete_unknown(user):
    with pytest.raises(NotFoundError):
        activities.soft_delete(999, user.id)


def test_list_by_frequency(activity, user):
    activities.create(user.id, "Read", "A chapter", "WEEKLY", date(2024, 1, 1))
    daily = activities.list_by_frequency(user.id, "daily")
    assert [a.title for a in daily] == ["Run"]
    with pytest.raises(InvalidFrequencyError):
        activities.list_by_frequency(user.id, "dailyweekly")
