"""Smoke tests for module imports and configuration validation.

Quick tests that verify the system is correctly installed and configured.
"""

import importlib

import pytest

from route_explorer.constants import LayerConfig, MarkerConfig, RouteConfig, ServiceConfig, StyleConfig
from route_explorer.model.strategy import SearchStrategy


# =============================================================================
# MODULE IMPORT TESTS
# =============================================================================


class TestModuleImports:
    """Parametrized smoke tests for module imports."""

    @pytest.mark.parametrize(
        "module_path,class_name",
        [
            # Core modules
            pytest.param("route_explorer.core.memo", "IdentityMemo", id="core_memo"),
            pytest.param("route_explorer.core.geometry_projector", "GeometryProjector", id="core_projector"),
            pytest.param("route_explorer.core.routing_client", "RoutingServiceClient", id="core_client"),
            pytest.param("route_explorer.core.route_dispatcher", "RouteRequestDispatcher", id="core_dispatcher"),
            # Model modules
            pytest.param("route_explorer.model.way", "Way", id="model_way"),
            pytest.param("route_explorer.model.path", "Path", id="model_path"),
            pytest.param("route_explorer.model.viewport", "ViewportBounds", id="model_viewport"),
            # UI modules
            pytest.param("route_explorer.ui.selection_machine", "SelectionStateMachine", id="ui_statemachine"),
            pytest.param("route_explorer.ui.coordinator", "MapInteractionCoordinator", id="ui_coordinator"),
            pytest.param("route_explorer.ui.center_map", "MapRenderer", id="ui_renderer"),
            pytest.param("route_explorer.ui.pydeck_click_handler", "StreamlitMapSurface", id="ui_surface"),
            pytest.param("route_explorer.ui.bottom_chart", "DistanceChart", id="ui_chart"),
        ],
    )
    def test_module_import(self, module_path: str, class_name: str) -> None:
        """Module can be imported without errors."""
        module = importlib.import_module(module_path)
        assert getattr(module, class_name) is not None


# =============================================================================
# CONFIGURATION VALIDATION TESTS
# =============================================================================


class TestConfigurationValidation:
    """Tests that configuration constants are valid and consistent."""

    def test_every_strategy_has_distinct_endpoint(self) -> None:
        endpoints = [s.endpoint for s in SearchStrategy]
        assert len(set(endpoints)) == len(endpoints)
        assert all(e.startswith("/") for e in endpoints)
        assert ServiceConfig.WAYS_ENDPOINT not in endpoints

    def test_road_types_are_immutable(self) -> None:
        """Used as a default argument, so it must not be a shared mutable list."""
        assert isinstance(ServiceConfig.ACCEPTED_ROAD_TYPES, tuple)
        assert len(set(ServiceConfig.ACCEPTED_ROAD_TYPES)) == len(ServiceConfig.ACCEPTED_ROAD_TYPES)

    def test_route_defaults_are_sensible(self) -> None:
        assert RouteConfig.DEFAULT_TARGET_DISTANCE_M > 0
        assert RouteConfig.DEFAULT_RESULT_COUNT >= RouteConfig.MIN_RESULT_COUNT
        assert len(MarkerConfig.LABELS) == RouteConfig.MAX_MARKERS == 2

    def test_layer_settings(self) -> None:
        assert LayerConfig.PATH_HIT_WIDTH_PX > LayerConfig.PATH_WIDTH_PX
        assert LayerConfig.NODE_CLUSTER_DIVISIONS >= 1

    def test_color_settings_in_range(self) -> None:
        assert 0 <= StyleConfig.SATURATION_PCT <= 100
        assert 0 <= StyleConfig.LIGHTNESS_PCT <= 100
        assert len(StyleConfig.FALLBACK_COLOR_RGBA) == 4
