"""
FoodFacts Viewer - search Open Food Facts and drill into product details.

Architecture:
- providers.py / off_provider.py: catalog data access (protocol + HTTP implementation)
- messages.py: outcome messages and the worker -> controller channel
- workers.py: background fetch tasks, one message each
- controller.py: view state machine driven by user actions and polled messages
- rendering.py: what the screens show for a given state (no Textual imports)
- views/: Textual screen/widget components
- app.py: Main application entry point

Extensibility points:
1. New catalogs: Implement the CatalogProvider protocol
2. New screens: Add to views/, map a ViewState to it in app.py
"""
