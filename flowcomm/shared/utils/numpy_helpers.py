import numpy as np


def convert_to_primitives_nested(obj: list | dict | np.ndarray | np.number) -> list | dict:
    """
    Convert numpy arrays in a nested structure (list or dict) to Python primitives.

    Args:
        obj (list | dict | np.ndarray): The input object which can be a list, dict, or numpy array.

    Returns:
        list | dict: The input object with numpy arrays converted to Python primitives.
    """
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    elif isinstance(obj, (list, tuple)):
        return [convert_to_primitives_nested(item) for item in obj]
    elif isinstance(obj, dict):
        return {key: convert_to_primitives_nested(value) for key, value in obj.items()}
    elif isinstance(obj, (np.number, np.bool_)):
        return obj.item()
    else:
        return obj
