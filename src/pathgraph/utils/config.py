# -*- coding: utf-8 -*-
"""
Configuration container for the pathgraph package.

This module defines one dataclass that centralizes user-facing parameters:

- `ParamConfig` – Global parameters shared by the graph and report classes.

**Use ``ParamConfig.describe()`` to display a clean summary of current settings.**

Notes
-----
* It is intended to be imported and the configuration object injected into the
  corresponding classes (`MatrixGraph`, `ListGraph`, `GraphReport`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

__all__ = ["ParamConfig", "resolve_config"]


# -----------------------------------------------------------------------------
# ParamConfig
# -----------------------------------------------------------------------------
@dataclass
class ParamConfig:
    """
    Base configuration class for handling parameters across all pathgraph classes.

    **Use ``ParamConfig.describe()`` to display a clean summary of current settings.**

    Notes
    -----
    When initializing ``ParamConfig`` **directly** with a dictionary, you must unpack it
    with ``**param`` so that keys map to dataclass fields. In contrast, pathgraph
    classes accept either a ``dict``, an existing ``ParamConfig`` or ``None`` and will
    handle conversion/validation internally.

    Examples
    --------
        # Direct instantiation (unpack required):
        >>> param = {"max_nodes": 256, "main_print": True}
        >>> config = ParamConfig(**param)

        # Within a pathgraph class (no unpack needed):
        >>> graph = MatrixGraph({"max_nodes": 256})

    Attributes
    ----------
    max_nodes : Optional[int]
        Hard upper bound on the node count accepted by ``build``. ``None`` means
        no cap: containers are sized from the node count of each build.
    main_print : bool
        Controls whether general execution information should be printed to the
        console. Useful for monitoring progress in scripts or debugging.
    required_fields : List[str]
        List of field names that are required for validation. This is set
        dynamically in the context of each class that uses ParamConfig.
    """

    max_nodes: Optional[int] = None  # Per-instance node cap (None = unbounded).
    main_print: bool = False  # Toggles general execution information in the console.

    # Custom field validation (e.g., required fields)
    required_fields: List[str] = field(default_factory=list)  # Dynamically set in each class.

    def validate(self) -> ParamConfig:
        """
        Validate that all required fields are provided and check value ranges.
        """
        for field_name in self.required_fields:
            if getattr(self, field_name) is None:
                raise ValueError(f"Required parameter '{field_name}' is missing.")

        self._validate_types()
        self._validate_max_nodes()

        return self

    def _validate_types(self) -> None:
        """
        Explicitly validate types for each field.
        """
        type_map = {
            "max_nodes": (int, type(None)),
            "main_print": (bool,),
        }

        for field_name, expected_types in type_map.items():
            value = getattr(self, field_name)
            # bool is a subclass of int and must not pass as a node count
            if field_name == "max_nodes" and isinstance(value, bool):
                raise TypeError("Parameter 'max_nodes' must be of type int or None, got bool.")
            if not isinstance(value, expected_types):
                raise TypeError(
                    f"Parameter '{field_name}' must be of type {expected_types}, got {type(value).__name__}."
                )

    def _validate_max_nodes(self) -> None:
        """
        Validate the 'max_nodes' parameter.
        """
        if self.max_nodes is None:
            return
        if self.max_nodes < 0:
            raise ValueError(f"Invalid 'max_nodes': {self.max_nodes}. It must be >= 0 or None.")

    def validate_for_class(self, required_fields: List[str]) -> None:
        """
        Validate that the specified required fields are present in the ParamConfig object.

        Parameters
        ----------
        required_fields : list of str
            List of field names that must be validated.

        Raises
        ------
        ValueError
            If any required field is missing.
        """
        missing_fields = [field for field in required_fields if getattr(self, field, None) is None]
        if missing_fields:
            raise ValueError(f"Missing required parameters: {', '.join(missing_fields)}")
        self._validate_types()
        self._validate_max_nodes()

    def describe(self) -> None:
        """
        Display a summary of the current configuration.
        """
        print("\nParamConfig (graph settings):")
        print(f" - Node cap                 : {self.max_nodes if self.max_nodes is not None else 'None (unbounded)'}")
        print(f" - Print summary            : {self.main_print}")


def resolve_config(
    param: Union[dict, ParamConfig, None],
    required_fields: Optional[List[str]] = None,
) -> ParamConfig:
    """
    Turn the ``param`` argument of a pathgraph class into a validated `ParamConfig`.

    Parameters
    ----------
    param : dict, ParamConfig or None
        Configuration parameters. ``None`` yields the defaults.
    required_fields : list of str, optional
        Fields that must be set for the calling class.

    Returns
    -------
    ParamConfig

    Raises
    ------
    TypeError
        If ``param`` has an unsupported type or a field has the wrong type.
    ValueError
        If a required field is missing or a value is out of range.
    """
    required_fields = required_fields or []

    # Case 1: nothing given, use defaults
    if param is None:
        return ParamConfig(required_fields=required_fields).validate()

    # Case 2: param is a dictionary
    if isinstance(param, dict):
        return ParamConfig(**param, required_fields=required_fields).validate()

    # Case 3: param is already a ParamConfig
    if isinstance(param, ParamConfig):
        param.validate_for_class(required_fields)
        return param

    raise TypeError("Parameter 'param' must be a dictionary, a ParamConfig object or None.")


# -----------------------------------------------------------------------------
# Example usage (no side effects at import time)
# -----------------------------------------------------------------------------
if __name__ == "__main__":
    config = ParamConfig(**{"max_nodes": 256, "main_print": True})
    config.validate()
    config.describe()
