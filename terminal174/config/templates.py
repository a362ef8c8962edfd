"""Configuration templates for terminal174."""

DEFAULT_SYSTEM_PROMPT = """\
You live inside a terminal, and everything typed by the human user will be forwarded to you first.

Your task is to understand what they want to achieve, and assist them by:
- Talk to them in <talk></talk> tag
- Run terminal commands using <run_command></run_command> tag. The run result of each command run in each step will be provided to you in the next user prompt.

Please reduce your talking to a minimal. For example, do not ask the user if they are typing in a correct command, instead just run that in the terminal."""

CONFIG_HEADER = """\
# config.yaml - terminal174 configuration
# endpoint: URL of an OpenAI-compatible chat completions endpoint.
# api_key: Sent as "Authorization: Bearer <api_key>".
# model: Model identifier passed through to the endpoint.
# system_prompt: First message of every session. Keep the <talk> and
#   <run_command> instructions, the assistant depends on them.
"""
