from task_tracker.core.domain.task import Task, TaskPatch, TaskPriority, TaskStatus


def test_valid_task_has_no_errors(sample_task):
    assert sample_task.validation_errors() == []


def test_title_bounds_are_inclusive():
    short = Task(title="abc", status=TaskStatus.TODO, priority=TaskPriority.LOW)
    long = Task(title="x" * 100, status=TaskStatus.TODO, priority=TaskPriority.LOW)

    assert short.validation_errors() == []
    assert long.validation_errors() == []


def test_title_out_of_bounds_is_reported():
    too_short = Task(title="AB", status=TaskStatus.TODO, priority=TaskPriority.LOW)
    too_long = Task(title="x" * 101, status=TaskStatus.TODO, priority=TaskPriority.LOW)

    assert too_short.validation_errors() == ["title: Title must be between 3 and 100 characters"]
    assert too_long.validation_errors() == ["title: Title must be between 3 and 100 characters"]


def test_free_string_status_and_priority_are_rejected_in_field_order():
    task = Task(title="AB", status="BOGUS", priority="NOPE")

    errors = task.validation_errors()

    assert len(errors) == 3
    assert errors[0].startswith("title:")
    assert errors[1] == "status: Status must be one of TODO, IN_PROGRESS, DONE, BLOCKED"
    assert errors[2] == "priority: Priority must be one of LOW, MEDIUM, HIGH, URGENT"


def test_apply_overwrites_only_set_fields(sample_task):
    sample_task.id = 7

    updated = sample_task.apply(TaskPatch(status=TaskStatus.DONE))

    assert updated.id == 7
    assert updated.status == TaskStatus.DONE
    assert updated.title == sample_task.title
    assert updated.description == sample_task.description
    assert updated.priority == sample_task.priority
    # source task is left as it was
    assert sample_task.status == TaskStatus.TODO


def test_patch_changes_skips_unset_fields():
    patch = TaskPatch(title="New title", priority=TaskPriority.URGENT)

    assert patch.changes() == {"title": "New title", "priority": TaskPriority.URGENT}
