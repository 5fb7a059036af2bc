from fakes import FakeConsole, unique_name
from todo_app.cli.auth import AuthMenu
from todo_app.cli.tasks import TaskMenu
from todo_app.main import build_app


def run(session_factory, inputs):
    console = FakeConsole(inputs)
    build_app(session_factory, console).run()
    return console


def test_exit_immediately(session_factory):
    console = run(session_factory, ["3"])
    assert "Goodbye!" in console.output


def test_end_of_input_exits_cleanly(session_factory):
    console = run(session_factory, [])
    assert "=== Collaborative To-Do ===" in console.output


def test_register_add_and_view(session_factory):
    name = unique_name()
    console = run(
        session_factory,
        [
            "1", name, "pw",            # register -> logged in
            "1", "Finish assignment", "work",
            "7",                        # view
            "0",                        # logout
            "3",
        ],
    )
    out = console.output
    assert f"Welcome, {name}!" in out
    assert "Available categories:" in out
    assert " - work" in out
    assert "Task added successfully!" in out
    assert f"{name} | Finish assignment | Status=ready_to_pick | Category=work" in out
    assert "Logged out." in out


def test_login_failure_returns_to_menu(session_factory, users):
    name = unique_name()
    users.create_user(name, "right")
    console = run(session_factory, ["2", name, "wrong", "3"])
    assert "Error: Invalid username or password" in console.output
    assert "Goodbye!" in console.output


def test_invalid_menu_choices(session_factory, user):
    console = run(session_factory, ["x", "2", user.name, "pw123", "42", "0", "3"])
    out = console.output
    assert "Invalid choice." in out
    assert "Invalid option. Please choose 0-9." in out


def test_start_complete_block_delete_flow(session_factory, tasks, user):
    tasks.add_task("Only task", user.id, "work")
    console = run(
        session_factory,
        [
            "2", user.name, "pw123",
            "3", "1",           # start
            "3",                # nothing startable now
            "5", "1",           # block
            "4", "1",           # complete
            "6", "1", "n",      # delete, cancelled
            "6", "1", "y",      # delete
            "4",                # nothing active left
            "0", "3",
        ],
    )
    out = console.output
    assert "Started: Only task (Status set to in_progress)" in out
    assert "(No startable tasks." in out
    assert "Marked blocked: Only task" in out
    assert "Marked completed: Only task" in out
    assert "Cancelled." in out
    assert "Task deleted (soft delete): Only task" in out
    assert "(No tasks found)" in out
    assert tasks.view_my_tasks(user.id)[0].status_name == "deleted"


def test_bad_task_number_is_reported(session_factory, tasks, user):
    tasks.add_task("Only task", user.id, "work")
    console = run(session_factory, ["2", user.name, "pw123", "4", "abc", "4", "7", "0", "3"])
    out = console.output
    assert "Invalid input. Please enter a number." in out
    assert "Invalid choice. Please select between 1 and 1" in out
    assert tasks.view_my_tasks(user.id)[0].status_name == "ready_to_pick"


def test_edit_and_filter(session_factory, tasks, user):
    tasks.add_task("Old name", user.id, "work")
    tasks.add_task("Walk", user.id, "leisure")
    console = run(
        session_factory,
        [
            "2", user.name, "pw123",
            "2", "2", "New name",        # list is newest first: Walk, Old name
            "8", "in_progress", "",
            "8", "", "leisure",
            "0", "3",
        ],
    )
    out = console.output
    assert "Task updated successfully!" in out
    filtered = out.split("--- Filtered Tasks ---")
    assert "New name | Status=in_progress | Category=work" in filtered[1]
    assert "Walk" not in filtered[1]
    assert "Walk | Status=ready_to_pick | Category=leisure" in filtered[2]


def test_add_task_errors_keep_menu_running(session_factory, user):
    console = run(
        session_factory,
        ["2", user.name, "pw123", "1", "   ", "1", "Dig", "gardening", "0", "3"],
    )
    out = console.output
    assert "Error: Task name cannot be empty." in out
    assert "Error: Category not found: gardening" in out
    assert "Logged out." in out


def test_assign_task_to_other_user(session_factory, tasks, user, other_user):
    tasks.add_task("Hand over", user.id, "work")
    console = run(
        session_factory,
        ["2", user.name, "pw123", "9", "1", other_user.name, "9", "0", "3"],
    )
    out = console.output
    assert f"Assigned 'Hand over' to {other_user.name}" in out
    assert tasks.view_my_tasks(user.id) == []
    assert tasks.view_my_tasks(other_user.id)[0].status_name == "in_progress"


def test_assign_to_unknown_user(session_factory, tasks, user):
    tasks.add_task("Keep", user.id, "work")
    console = run(session_factory, ["2", user.name, "pw123", "9", "1", "nobody_here", "0", "3"])
    assert "Error: User not found: nobody_here" in console.output
    assert len(tasks.view_my_tasks(user.id)) == 1


def test_task_menu_stops_when_logged_out(auth, tasks):
    console = FakeConsole([])
    TaskMenu(tasks, auth, console).run()
    assert console.prompts == []


def test_database_errors_do_not_end_the_session(session_factory, engine, user):
    from todo_app.database import Base

    console = FakeConsole([])
    menu = build_app(session_factory, console)
    assert isinstance(menu, AuthMenu)

    # login, then lose the tables underneath the running menu
    menu.auth.login(user.name, "pw123")
    Base.metadata.drop_all(bind=engine)
    console.inputs = ["7", "0"]
    TaskMenu(menu.tasks, menu.auth, console).run()

    assert "Error: Database error, please try again later" in console.output


def test_ctrl_c_in_task_menu_exits(session_factory, user):
    console = FakeConsole(["2", user.name, "pw123", KeyboardInterrupt, "3"])
    menu = build_app(session_factory, console)
    menu.run()

    assert console.inputs == ["3"]
    assert "Logged out." not in console.output
    assert "Goodbye!" not in console.output
    assert not menu.auth.is_logged_in()


def test_ctrl_c_inside_a_task_prompt_exits(session_factory, tasks, user):
    tasks.add_task("Only task", user.id, "work")
    console = FakeConsole(["2", user.name, "pw123", "4", KeyboardInterrupt, "3"])
    menu = build_app(session_factory, console)
    menu.run()

    assert console.inputs == ["3"]
    assert tasks.view_my_tasks(user.id)[0].status_name == "ready_to_pick"
    assert not menu.auth.is_logged_in()


def test_end_of_input_in_task_menu_exits_once(session_factory, user):
    console = FakeConsole(["2", user.name, "pw123", EOFError, "3"])
    build_app(session_factory, console).run()

    assert console.inputs == ["3"]
    assert console.output.count("=== Collaborative To-Do ===") == 1


def test_ctrl_c_at_auth_menu_exits(session_factory):
    console = FakeConsole([KeyboardInterrupt, "3"])
    build_app(session_factory, console).run()
    assert console.inputs == ["3"]
