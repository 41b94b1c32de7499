from egg.evaluation.evaluator import evaluate

__all__ = ["evaluate"]
