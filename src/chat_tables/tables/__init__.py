"""Cell formatting, search and pagination for tables shown in chat messages.

Submodules:
  patterns     -- keyword tuples and compiled regex patterns
  classifiers  -- column-name -> ColumnType classification
  formatting   -- currency / datetime / header formatting, CellFormatter protocol
  display      -- page-number and ellipsis rules, jump-to-page validation
  schema       -- TableState and TablePage Pydantic models
  registry     -- TableRegistry, the per-conversation key -> state mapping
  pagination   -- TablePaginator search-then-paginate operations
  rendering    -- TablePage snapshots and markdown output
"""
