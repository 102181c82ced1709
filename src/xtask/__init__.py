from .dsl import TaskTable, call, cargo, run, table
from .model import Action, Call, Cargo, Run, Vars
from .runner import run_tasks
from .tasks import TASKS

__all__ = ["TaskTable", "call", "cargo", "run", "table", "Action", "Call", "Cargo", "Run", "Vars", "run_tasks", "TASKS"]
