"""Header value types and tokenizer."""

from cookiespec.http.headers import Header, HeaderElement, NameValuePair, parse_elements

__all__ = ["Header", "HeaderElement", "NameValuePair", "parse_elements"]
