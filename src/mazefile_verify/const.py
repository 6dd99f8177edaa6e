ERRORS = {
  "E_BAD_MAGIC": "File does not start with the MAZE tag",
  "E_UNKNOWN_TYPE": "Maze type is not rectangular (1) or circular (2)",
  "E_TRUNCATED": "Stream ends before a declared length",
  "E_INCONSISTENT_OFFSET": "Body start lies inside the header",
  "E_INVALID_TOPOLOGY": "Maze dimensions or ring profile are degenerate",
  "E_OUT_OF_BOUNDS": "Start or end lies outside the grid",
  "E_TRAILING_BYTES": "Bytes follow the maze body",
  "E_RESERVED_BITS": "Padding bits set in a cell record",
  "E_FORMAT": "Mazefile format violation",
  "E_LINK_OUT_OF_BOUNDS": "Passage leads off the grid",
  "E_LINK_INTO_MASK": "Passage leads into a masked cell",
  "E_UNREQUITED_LINK": "Neighbouring cell does not open back",
  "E_ENDPOINT_MASKED": "Start or end cell is masked",
}
