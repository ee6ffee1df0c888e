from pdf_summarizer.summarization.base import BaseSummarizer
from pdf_summarizer.summarization.factory import SummarizerFactory
from pdf_summarizer.summarization.summarizer import Summarizer

__all__ = ["BaseSummarizer", "Summarizer", "SummarizerFactory"]
