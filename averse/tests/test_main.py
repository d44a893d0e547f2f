import pytest
from averse.domain.Plan import Plan
from averse.main import build_parser, main
from averse.utilities.config import N_PLANS, PLAN_DIR, RECIPE_DIR


def _dirs(recipe_repo, plan_repo):
    return ["-r", str(recipe_repo.recipe_dir), "-p", str(plan_repo.plan_dir)]


def test_parser_defaults():
    args = build_parser().parse_args(["behold"])
    assert args.command == "behold"
    assert args.n_plans == N_PLANS
    assert args.recipe_dir == RECIPE_DIR
    assert args.plan_dir == PLAN_DIR


def test_plan_requires_date():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["plan"])
    with pytest.raises(SystemExit):
        build_parser().parse_args(["plan", "--date", "2022/07/31"])
    with pytest.raises(SystemExit):
        build_parser().parse_args(["plan", "--date", ".2022-07-31"])
    assert build_parser().parse_args(["plan", "-d", "2022-07-31"]).date == "2022-07-31"


def test_behold_command(stocked_recipe_repo, plan_repo, scripted_input, capsys):
    plan_repo.save(Plan("2022-07-31", {"Tuesday": ["Pancakes"]}))
    scripted_input("1", "1", "1")
    assert main(_dirs(stocked_recipe_repo, plan_repo) + ["behold", "-n", "1"]) == 0
    assert "1. Mix" in capsys.readouterr().out


def test_plan_command(stocked_recipe_repo, plan_repo, scripted_input, capsys):
    scripted_input("1", "chili", "", "n")
    assert main(_dirs(stocked_recipe_repo, plan_repo) + ["plan", "--date", "2022-07-31"]) == 0
    assert plan_repo.load("2022-07-31").recipes == {"Sunday": ["Beef Chili"]}
    assert "onion" in capsys.readouterr().out


def test_unresolvable_recipe_exits_nonzero(stocked_recipe_repo, plan_repo, scripted_input, capsys):
    plan_repo.save(Plan("2022-08-07", {"Monday": ["Deleted Recipe"]}))
    scripted_input("1", "1", "1")
    assert main(_dirs(stocked_recipe_repo, plan_repo) + ["behold"]) == 1
    assert "error: No such file" in capsys.readouterr().err


def test_missing_recipe_directory_is_an_error(recipe_repo, plan_repo, capsys):
    assert main(_dirs(recipe_repo, plan_repo) + ["view"]) == 1
    assert "error: Failed to read/write" in capsys.readouterr().err


def test_end_of_input_aborts(recipe_repo, plan_repo, scripted_input, capsys):
    scripted_input()
    assert main(_dirs(recipe_repo, plan_repo) + ["add"]) == 130
    assert "Aborted." in capsys.readouterr().err
    assert not recipe_repo.recipe_dir.exists()
