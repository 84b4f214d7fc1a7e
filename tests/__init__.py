"""DASHUP test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/function.

General guidance
- Helpers are pure; tests need no fixtures beyond plain values.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, property
"""
