"""
Wrike export model layer.
Flattens task trees and resolves users, statuses and folder membership.
"""

from .cross_reference import FolderMembership
from .identity import UserDirectory
from .records import CSV_FIELDS, assemble_folder, assemble_task
from .status import status_label
from .task_tree import TaskIndex, flatten_task, flatten_tasks, unique_by_id
from .transform import ConversionResult, transform_export

__all__ = [
    'CSV_FIELDS',
    'ConversionResult',
    'FolderMembership',
    'TaskIndex',
    'UserDirectory',
    'assemble_folder',
    'assemble_task',
    'flatten_task',
    'flatten_tasks',
    'status_label',
    'transform_export',
    'unique_by_id',
]
