"""Constants for the Kickabout TUI."""

# Frame pacing
FRAME_RATE = 60                 # Frames advanced per second of wall time

# Field widget size in terminal cells
FIELD_COLUMNS = 80
FIELD_ROWS = 24

# Play log
LOG_LINES = 6

# Cell glyphs
PLAYER_GLYPH = "@"
TEAMMATE_GLYPH = "T"
OPPONENT_GLYPH = "X"
BALL_GLYPH = "o"
GOAL_GLYPH = "#"
HALFWAY_GLYPH = "|"
GRASS_GLYPH = " "

# Rich styles
GRASS_STYLE = "on #4a7c59"
PLAYER_STYLE = "bold #ffffff on #0066cc"
TEAMMATE_STYLE = "bold #ffffff on #0099ff"
OPPONENT_STYLE = "bold #ffffff on #cc0000"
BALL_STYLE = "bold #000000 on #ffffff"
GOAL_STYLE = "#ffffff on #ff0000"
LINE_STYLE = "#ffffff on #4a7c59"
