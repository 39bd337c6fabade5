"""
Working copy creation for report templates.

The template itself is never written: the copy goes to a resolved
destination, gets a ``_copy`` suffix if it would land on the template, and
a numeric ``_1``, ``_2``, ... suffix if the destination is already taken.
"""

import os
import shutil
from typing import Optional, Tuple

from ..utils.logging_config import get_module_logger
from .config import Config
from .results import WorkingCopyResult


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _as_text(value) -> Optional[str]:
    """Return a str, bytes or path-like argument as a str; None stays None."""
    return None if value is None else os.fsdecode(value)


def copy_exclusive(source_path: str, target_path: str) -> None:
    """
    Copy a file to a path that must not exist yet.

    A target left incomplete by a failed copy is removed again, so the
    name stays free for the next attempt.
    """
    with open(source_path, 'rb') as source, open(target_path, 'xb') as target:
        try:
            shutil.copyfileobj(source, target)
        except Exception:
            target.close()
            os.remove(target_path)
            raise


def resolve_target_directory(template_path: str,
                             output_directory: Optional[str] = None,
                             project_file: Optional[str] = None) -> Tuple[str, bool]:
    """
    Pick the directory the working copy goes to.

    Returns:
        Tuple of the directory and a flag telling whether it fell back to
        the template's own folder
    """
    if not _is_blank(output_directory):
        return output_directory, False
    if not _is_blank(project_file):
        return os.path.dirname(os.path.abspath(project_file)), False
    return os.path.dirname(os.path.abspath(template_path)), True


def resolve_filename(template_path: str, filename: Optional[str] = None) -> str:
    if _is_blank(filename):
        return os.path.basename(template_path)
    if not filename.lower().endswith(Config.DOCX_EXTENSION):
        filename += Config.DOCX_EXTENSION
    return filename


def same_path(first: str, second: str) -> bool:
    return os.path.normcase(os.path.abspath(first)) == os.path.normcase(os.path.abspath(second))


def resolve_candidate_path(template_path: str, target_dir: str, filename: str) -> Tuple[str, bool]:
    """
    Join directory and filename, steering away from the template path.

    Returns:
        Tuple of the candidate path and a flag telling whether the copy
        suffix was applied
    """
    candidate = os.path.join(target_dir, filename)
    if same_path(candidate, template_path):
        stem, ext = os.path.splitext(filename)
        return os.path.join(target_dir, f"{stem}{Config.COPY_SUFFIX}{ext}"), True
    return candidate, False


def next_free_path(candidate: str) -> str:
    """Return the candidate, or the first ``<stem>_N<ext>`` that does not exist yet."""
    if not os.path.exists(candidate):
        return candidate
    directory = os.path.dirname(candidate)
    stem, ext = os.path.splitext(os.path.basename(candidate))
    index = 1
    while True:
        path = os.path.join(directory, Config.COLLISION_SUFFIX_FORMAT.format(stem=stem, index=index, ext=ext))
        if not os.path.exists(path):
            return path
        index += 1


class WorkingCopyProvisioner:
    """Creates the working .docx that the table updaters and exporter operate on."""

    def __init__(self):
        self.logger = get_module_logger(__name__)

    def create(self, template_path: str,
               output_directory: Optional[str] = None,
               filename: Optional[str] = None,
               create: bool = False,
               project_file: Optional[str] = None) -> WorkingCopyResult:
        """
        Resolve the working copy path and, when ``create`` is set, copy the template there.

        Args:
            template_path: Template .docx, required and never overwritten
            output_directory: Destination folder; defaults to the project file's
                folder, else the template's folder
            filename: Destination name; defaults to the template name, .docx is appended if missing
            create: When False only the would-be path is reported
            project_file: Path of the saved project driving this run, if any

        Returns:
            WorkingCopyResult with the working path and the echoed template path
        """
        result = WorkingCopyResult(logger=self.logger)

        try:
            template_path, output_directory, filename, project_file = (
                _as_text(value) for value in (template_path, output_directory, filename, project_file))
        except TypeError as e:
            return result.fail(f"Invalid path argument: {e}")
        result.template_path = template_path or ''

        if _is_blank(template_path):
            return result.fail("TemplatePath is empty.")

        if not os.path.isfile(template_path):
            return result.fail(f"Template not found: {template_path}")

        try:
            target_dir, fell_back = resolve_target_directory(template_path, output_directory, project_file)
            if fell_back:
                result.warning("Project file is not saved. Copy will be created in template folder.")

            candidate, renamed = resolve_candidate_path(
                template_path, target_dir, resolve_filename(template_path, filename))
            if renamed:
                result.warning("Output path equals template path. Using a suffix to avoid overwriting template.")

            if not create:
                result.path = candidate
                result.remark("Create is false. No copy created.")
                return result

            os.makedirs(target_dir, exist_ok=True)
            working_path = next_free_path(candidate)

            # Exclusive create so an existing file is never overwritten
            copy_exclusive(template_path, working_path)
            try:
                shutil.copystat(template_path, working_path)
            except OSError as e:
                result.warning(f"File attributes of the template were not copied: {e}")

        except PermissionError as e:
            return result.fail(f"Access denied: {e}")
        except OSError as e:
            return result.fail(f"IO error: {e}")
        except Exception as e:
            self.logger.debug("Working copy of %s failed", template_path, exc_info=True)
            return result.fail(f"Unexpected error: {e}")

        result.path = working_path
        result.success = True
        result.remark(f"Working copy created: {working_path}")
        return result
