from backend.engine.grader.renderer import Renderer
from backend.engine.grader.runner import GradeReport, Grader

__all__ = ["GradeReport", "Grader", "Renderer"]
