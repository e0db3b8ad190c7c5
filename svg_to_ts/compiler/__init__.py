from .typescript import TypeScriptCompiler

__all__ = ["TypeScriptCompiler"]
