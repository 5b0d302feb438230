"""Deep Dissect proxy — relays chat-completion requests to DeepSeek."""
