"""List-table resolution: nested bullet lists in, validated table grids out.

Submodules:
  nodes       -- content node types and the leaf text aggregator
  patterns    -- marker constants, validation modes, bullet-line regex
  markers     -- anchored span-marker scanner ("[r2c3]")
  cells       -- cell annotator (span / placeholder markers)
  grid        -- grid builder (list-of-rows -> rows of Cell)
  validation  -- structural validator
  layout      -- occupancy footprint, section partitioner, grid renderer
  pipeline    -- main build_table() entry point
  schema      -- Pydantic models for cells, issues, options and results
  errors      -- StructureError / BoundsError
  reader      -- markdown bullet-list reader
  formatting  -- HTML rendering and error reports
  config      -- environment-backed defaults and logging format
  cli         -- list-table command
"""
