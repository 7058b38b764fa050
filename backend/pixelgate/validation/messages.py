"""Texts shown to contributors when their pull request is reviewed."""

from __future__ import annotations

from typing import Any, Iterable

THANK_YOU = "Thank you so much for contributing your pixel! 💖"

EMPTY_PULL_REQUEST = "This PR is empty and needs a manual review"
EMPTY_PATCH = "This PR appears to be empty and needs a manual review"

REMOVE_PIXEL = "I'm sorry but you can't remove a pixel that someone else contributed"
ONE_PIXEL_PER_USER = "I'm sorry but you can only contribute one pixel per GitHub username."
SAME_ROW = (
    "Please make sure all of your changes are on the same line "
    "and that you are only modifying one row."
)
OVERRIDE_PIXEL = "I'm sorry but you cannot override someone elses pixel."

MISSING_COLOR = "Please specify either a color using `color: '#000000` in your pixel."
INVALID_X = "Please make sure your pixel submission has a valid positive `x` coordinate as a number."
INVALID_Y = "Please make sure your pixel submission has a valid positive `y` coordinate as a number."


def username_mismatch(submitter: str, submitted: Any) -> str:
    return (
        f'The username in your pixel submission needs to match your username of "{submitter}". '
        f'You submitted "{submitted}" instead.'
    )


def accidental_deletion(sync_fork_help_url: str) -> str:
    return (
        "It seems like you are accidentally deleting some contributions of others. "
        "Please make sure you have pulled the latest changes from the master branch "
        f"and resolved any merge conflicts. {sync_fork_help_url}"
    )


def missing_usernames(usernames: Iterable[Any]) -> str:
    return f"Make sure that the following usernames are indeed included: {','.join(str(u) for u in usernames)}"


def malformed_path(path: Any) -> str:
    return f"I couldn't tell which pixel the change at `{path}` belongs to. This PR needs a manual review."


def multiple_files(dataset_file: str) -> str:
    return (
        "This PR requires a manual review because you are changing more files "
        f"than just `{dataset_file}`."
    )


def multiple_files_faq(
    dataset_file: str,
    touched_files: Iterable[str],
    git_help_url: str,
) -> str:
    """Long-form explanation listing every file the pull request touches."""
    file_list = "\n".join(f"- {name}" for name in touched_files)
    return (
        "## FAQ\n"
        "\n"
        "*Why has my Pull Request failed the tests?*\n"
        "\n"
        "Your Pull Request didn't fail the tests but you modified more files with\n"
        f"this PR than just the `{dataset_file}` file.\n"
        "\n"
        "The files you modified are:\n"
        f"{file_list}\n"
        "\n"
        "If you did this on purpose, please consider breaking your PR into multiple ones.\n"
        "This will help us to auto-verify your pixels change and someone will take a\n"
        "look at the remaining PR.\n"
        "\n"
        f"If you *didn't* do this on purpose, check out {git_help_url} or\n"
        "other resources on how you can revert the remaining changes."
    )
