"""Tests for line-style (`///`) doc extraction and multi-line signatures."""

from __future__ import annotations

from mvn2llm.extract import scan_text
from mvn2llm.models import DocRecord
from tests._fixtures.jar_builder import java_source


def _extract(source: str) -> list[DocRecord]:
    return scan_text("TestClass", java_source(source))


def test_single_line_doc() -> None:
    docs = _extract(
        """
        /// this is a markdown comment
        public void simpleMethod() {}
        """
    )

    assert docs == [
        DocRecord("TestClass", "/// this is a markdown comment", "public void simpleMethod() {}")
    ]


def test_consecutive_lines_form_one_doc() -> None:
    docs = _extract(
        """
        /// This is a multiline
        /// documentation block
        /// with several lines
        public void multilineMethod() {}
        """
    )

    assert len(docs) == 1
    assert docs[0].documentation == (
        "/// This is a multiline\n/// documentation block\n/// with several lines"
    )
    assert docs[0].signature == "public void multilineMethod() {}"


def test_first_non_marker_line_starts_the_signature() -> None:
    docs = _extract(
        """
        /// Adds two numbers.
        public static int add(int a,
                              int b) {
            return a + b;
        }
        """
    )

    assert len(docs) == 1
    assert docs[0].documentation == "/// Adds two numbers."
    assert "public static" not in docs[0].documentation
    assert docs[0].signature == "public static int add(int a, int b) {"


def test_blank_lines_after_line_doc() -> None:
    docs = _extract(
        """

        /// Documentation with
        /// blank lines after


        public void spacedMethod() {}
        """
    )

    assert len(docs) == 1
    assert docs[0].signature == "public void spacedMethod() {}"
    assert docs[0].documentation == "/// Documentation with\n/// blank lines after"


def test_multiple_line_docs() -> None:
    docs = _extract(
        """
        /// First method
        public void firstMethod() {}

        /// Second method
        public void secondMethod() {}

        /// Third method
        /// with multiple lines
        public void thirdMethod() {}
        """
    )

    assert [doc.documentation for doc in docs] == [
        "/// First method",
        "/// Second method",
        "/// Third method\n/// with multiple lines",
    ]
    assert [doc.signature for doc in docs] == [
        "public void firstMethod() {}",
        "public void secondMethod() {}",
        "public void thirdMethod() {}",
    ]


def test_complex_annotated_declarations() -> None:
    docs = _extract(
        """
        /// This is a test case of what complex looks like!
        @SuppressWarnings(value = {
            "one",
            "two"
        }
        )
        @Deprecated(since
            = "Use something else")
        public
        static
        class AnnotatedClass<T>
            implements Function<
            T,
            List<String
                >
            > {

          /// This is a field

          @SuppressWarnings({
              "unused",
              "unchecked"
          }
          )
          String field;


          @Override
          public List<String> apply(T t) {
            return List.of();
          }

          ///
          /// This is a method
          ///
          @SuppressWarnings({
              "unused",
              "unchecked"
          }
          )
          public
          static <T
              , R>
          List<R> doIt
          (T t) {
            // stuff
            return List.of();
          }
        }
        """
    )

    assert len(docs) == 3
    assert docs[0].documentation == "/// This is a test case of what complex looks like!"
    assert docs[0].normalized_signature == (
        '@SuppressWarnings(value = { "one", "two" } ) @Deprecated(since = "Use something else") '
        "public static class AnnotatedClass<T> implements Function< T, List<String > > {"
    )
    assert docs[1].documentation == "/// This is a field"
    assert docs[1].normalized_signature == (
        '@SuppressWarnings({ "unused", "unchecked" } ) String field;'
    )
    assert docs[2].documentation == "///\n  /// This is a method\n  ///"
    assert docs[2].normalized_signature == (
        '@SuppressWarnings({ "unused", "unchecked" } ) public static <T , R> List<R> doIt (T t) {'
    )
