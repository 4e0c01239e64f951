# Instruction sent as the system message of every extraction request.
# The line markers below are the ones extraction.task_extractor recognises.
EXTRACTION_SYSTEM_PROMPT = """Extract the task name, due date and category color from the following input.
Convert any relative dates such as 'next Wednesday' or 'tomorrow' to an absolute date in the format MM/dd/yyyy.
The category color must be one of: blue, red, green, yellow. Use yellow if the input does not suggest one.

Respond with exactly these lines and nothing else:
* Task name: <short task name>
* Due date: <MM/dd/yyyy>
* Category color: <blue|red|green|yellow>

Omit the due date line if the input has no deadline."""
