"""Terminal UI: renderer, HUD and input capture for the simulation."""
