"""Qt widgets and controllers for the todo list."""
