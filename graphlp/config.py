"""Configuration defaults for flow formulations."""

from dataclasses import dataclass
from typing import Any, Hashable


@dataclass
class FormulationConfig:
    """Defaults used when a graph model is attached and built."""

    # Commodity label used when none are given
    default_commodity: str = "default"

    # Display name of each (edge, commodity) flow variable
    flow_name_template: str = "flow_{src}_to_{dst}_commodity_{commodity}"

    # Prefix of the provisional names PuLP gives to a freshly created block
    variable_block_prefix: str = "flow"

    # Request the E x C flow block in one call when the host model can do it
    bulk_variable_creation: bool = True

    def flow_name(self, src: Hashable, dst: Hashable, commodity: Any) -> str:
        """Render the display name of the flow variable on ``src -> dst``."""
        return self.flow_name_template.format(
            src=str(src), dst=str(dst), commodity=str(commodity)
        )


# Global configuration instance
FORMULATION_CONFIG = FormulationConfig()
