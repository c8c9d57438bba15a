"""Core analysis components: tokenizer, relationship engines, layout, stores."""
