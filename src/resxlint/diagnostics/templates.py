"""Diagnostic message templates.

Centralized message templates for testable, consistent diagnostics.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, Severity


class ErrorTemplate:
    """Centralized diagnostic templates.

    All diagnostic messages are created here. NO f-strings at reporting sites!
    This provides:
        - Testable messages
        - Consistent wording between base and satellite checks
        - Documentation of every diagnostic the validator can emit
    """

    # ------------------------------------------------------------------
    # Structural (reader and include entries)
    # ------------------------------------------------------------------

    @staticmethod
    def root_element_invalid(found: str) -> Diagnostic:
        """Document root is not <root>."""
        return Diagnostic(
            code=DiagnosticCode.ROOT_ELEMENT_INVALID,
            message=f"Root element is not <root> (found <{found}>)",
            resource="root",
        )

    @staticmethod
    def resource_name_missing() -> Diagnostic:
        """<data> element without a name attribute."""
        return Diagnostic(
            code=DiagnosticCode.RESOURCE_NAME_MISSING,
            message="Resource name is missing",
            resource="data",
        )

    @staticmethod
    def resource_value_missing(name: str) -> Diagnostic:
        """<data> element without a <value> child."""
        return Diagnostic(
            code=DiagnosticCode.RESOURCE_VALUE_MISSING,
            message="Resource value is missing",
            resource=name,
        )

    @staticmethod
    def resource_value_duplicated(name: str, value: str) -> Diagnostic:
        """<data> element with more than one <value> child."""
        return Diagnostic(
            code=DiagnosticCode.RESOURCE_VALUE_DUPLICATED,
            message=f"Resource value is duplicated: {value}",
            resource=name,
        )

    @staticmethod
    def resource_comment_duplicated(name: str, comment: str) -> Diagnostic:
        """<data> element with more than one <comment> child."""
        return Diagnostic(
            code=DiagnosticCode.RESOURCE_COMMENT_DUPLICATED,
            message=f"Resource comment is duplicated: {comment}",
            resource=name,
        )

    @staticmethod
    def unexpected_node(name: str, node: str) -> Diagnostic:
        """Unknown child element inside <data>."""
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_NODE,
            message=f"Unexpected node: {node}",
            resource=name,
            severity=Severity.WARNING,
        )

    @staticmethod
    def resource_name_duplicated(name: str) -> Diagnostic:
        """Two <data> elements with the same name in one file."""
        return Diagnostic(
            code=DiagnosticCode.RESOURCE_NAME_DUPLICATED,
            message="Resource name is duplicated in the file",
            resource=name,
        )

    @staticmethod
    def file_unreadable(path: str, reason: str) -> Diagnostic:
        """File could not be read or parsed as XML.

        Args:
            path: File that failed
            reason: Underlying error text

        Returns:
            Diagnostic for FILE_UNREADABLE
        """
        return Diagnostic(
            code=DiagnosticCode.FILE_UNREADABLE,
            message=f"Unable to read resource file: {reason}",
            resource=path,
        )

    @staticmethod
    def include_value_corrupted(name: str) -> Diagnostic:
        """Include entry whose value is not "<file>;<type>, <assembly>"."""
        return Diagnostic(
            code=DiagnosticCode.INCLUDE_VALUE_CORRUPTED,
            message="Structure of the value node is corrupted",
            resource=name,
            hint='Expected "<file>;<type>, <assembly>"',
        )

    # ------------------------------------------------------------------
    # Comment grammar
    # ------------------------------------------------------------------

    @staticmethod
    def bad_parameter_declaration(name: str, declaration: str) -> Diagnostic:
        """Parameter declaration is not `<type> <identifier>`.

        Args:
            name: Resource name
            declaration: The offending comma-separated entry, trimmed

        Returns:
            Diagnostic for BAD_PARAMETER_DECLARATION
        """
        return Diagnostic(
            code=DiagnosticCode.BAD_PARAMETER_DECLARATION,
            message=f"bad parameter declaration: {declaration}",
            resource=name,
            hint="Declare parameters as {type1 name1, type2 name2}",
        )

    @staticmethod
    def empty_parameter_declaration(name: str, comment: str) -> Diagnostic:
        """Parameter list braces with nothing inside."""
        return Diagnostic(
            code=DiagnosticCode.EMPTY_PARAMETER_DECLARATION,
            message=f"invalid parameter declaration found in the comment: {comment}",
            resource=name,
        )

    # ------------------------------------------------------------------
    # Placeholder syntax
    # ------------------------------------------------------------------

    @staticmethod
    def invalid_format_item(name: str, position: int, reason: str) -> Diagnostic:
        """Malformed {...} sequence in a value.

        Args:
            name: Resource name
            position: Character offset where scanning stopped (0-indexed)
            reason: What the scanner expected

        Returns:
            Diagnostic for INVALID_FORMAT_ITEM
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_FORMAT_ITEM,
            message=f"invalid format item at position {position}: {reason}",
            resource=name,
            hint="Escape literal braces as {{ and }}",
        )

    # ------------------------------------------------------------------
    # Consistency
    # ------------------------------------------------------------------

    @staticmethod
    def value_not_in_variants(name: str, value: str, allowed: str) -> Diagnostic:
        """Base value of an enumeration resource is not a declared variant."""
        return Diagnostic(
            code=DiagnosticCode.VALUE_NOT_IN_VARIANTS,
            message=f"provided value '{value}' is not in the list of allowed options: {allowed}",
            resource=name,
        )

    @staticmethod
    def placeholder_count_mismatch(name: str, index: int, declared: int) -> Diagnostic:
        """Distinct placeholder count differs from the declared parameter count.

        Args:
            name: Resource name
            index: First placeholder index outside the declared range, or the
                first declared index that is not used
            declared: Number of declared parameters

        Returns:
            Diagnostic for PLACEHOLDER_COUNT_MISMATCH
        """
        return Diagnostic(
            code=DiagnosticCode.PLACEHOLDER_COUNT_MISMATCH,
            message=(
                "the number of format placeholders in the string doesn't match number "
                f"of parameters listed in the comment: placeholder '{{{index}}}' "
                f"(declared parameters: {declared})"
            ),
            resource=name,
        )

    @staticmethod
    def placeholder_not_used(name: str, index: int) -> Diagnostic:
        """Declared index missing from a value with the right placeholder count."""
        return Diagnostic(
            code=DiagnosticCode.PLACEHOLDER_NOT_USED,
            message=f"'{name}' format placeholder '{{{index}}}' is not used in the format string",
            resource=name,
        )

    @staticmethod
    def format_items_missing(name: str) -> Diagnostic:
        """Parameters declared but the value has no placeholders."""
        return Diagnostic(
            code=DiagnosticCode.FORMAT_ITEMS_MISSING,
            message=(
                "no format items are used in the value, "
                "but function parameters are declared in the comment"
            ),
            resource=name,
        )

    @staticmethod
    def invalid_format_specifier(
        name: str,
        specifier: str,
        parameter_name: str,
        parameter_type: str,
    ) -> Diagnostic:
        """Specifier would fail to format a value of the declared type.

        Args:
            name: Resource name
            specifier: Text after ':' in the format item
            parameter_name: Declared parameter bound to the placeholder
            parameter_type: Declared type of that parameter

        Returns:
            Diagnostic for INVALID_FORMAT_SPECIFIER
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_FORMAT_SPECIFIER,
            message=(
                f"format specifier ':{specifier}' is not valid for parameter "
                f"'{parameter_name}' of type '{parameter_type}'"
            ),
            resource=name,
        )

    @staticmethod
    def satellite_value_not_in_variants(
        name: str,
        value: str,
        file: str,
        base_file: str,
        allowed: str,
    ) -> Diagnostic:
        """Translated value of an enumeration resource is not a base variant."""
        return Diagnostic(
            code=DiagnosticCode.SATELLITE_VALUE_NOT_IN_VARIANTS,
            message=(
                f"provided value '{value}' in language resource file \"{file}\" doesn't "
                f"match any of the allowed options defined in main resource file "
                f"\"{base_file}\": {allowed}"
            ),
            resource=name,
        )

    @staticmethod
    def satellite_type_mismatch(name: str, base_file: str, file: str) -> Diagnostic:
        """Include entry type differs between base and satellite."""
        return Diagnostic(
            code=DiagnosticCode.SATELLITE_TYPE_MISMATCH,
            message=(
                f"types of resources are different in main resource file \"{base_file}\" "
                f"and language resource file \"{file}\""
            ),
            resource=name,
        )

    # ------------------------------------------------------------------
    # Policy
    # ------------------------------------------------------------------

    @staticmethod
    def parameters_declaration_missing(name: str) -> Diagnostic:
        """Value has placeholders but the comment declares no parameters."""
        return Diagnostic(
            code=DiagnosticCode.PARAMETERS_DECLARATION_MISSING,
            message=(
                "string value contains formatting placeholders, but the function "
                "parameters declaration is missing in the comment"
            ),
            resource=name,
            hint="Declare parameters in the comment: {type1 name1, type2 name2}",
        )

    @staticmethod
    def satellite_placeholder_mismatch(
        name: str,
        base_file: str,
        file: str,
        expected: int,
        found: tuple[int, ...],
    ) -> Diagnostic:
        """Translated placeholders differ from the base declaration.

        Args:
            name: Resource name
            base_file: Neutral-language file
            file: Satellite file
            expected: Number of placeholders the base declares
            found: Sorted placeholder indexes found in the translation

        Returns:
            Diagnostic for SATELLITE_PLACEHOLDER_MISMATCH
        """
        indexes = ", ".join(f"{{{i}}}" for i in found) or "none"
        return Diagnostic(
            code=DiagnosticCode.SATELLITE_PLACEHOLDER_MISMATCH,
            message=(
                f"numbers of format parameters are different in the main resource file "
                f"\"{base_file}\" ({expected}) and language resource file \"{file}\" "
                f"(found: {indexes})"
            ),
            resource=name,
        )

    @staticmethod
    def specifier_on_text(
        name: str,
        specifier: str,
        parameter_name: str,
        value: str,
    ) -> Diagnostic:
        """Format specifier applied to a string parameter."""
        return Diagnostic(
            code=DiagnosticCode.SPECIFIER_ON_TEXT,
            message=(
                f"format specifier ':{specifier}' cannot be used with string parameter "
                f"'{parameter_name}'. Either remove ':{specifier}' from the format string "
                f"in: '{value}' or update type of '{parameter_name}' "
                "in the comment of the main .resx file."
            ),
            resource=name,
            severity=Severity.WARNING,
        )

    @staticmethod
    def satellite_orphan_resource(name: str, file: str, base_file: str) -> Diagnostic:
        """Satellite entry with no counterpart in the base file."""
        return Diagnostic(
            code=DiagnosticCode.SATELLITE_ORPHAN_RESOURCE,
            message=(
                f"resource provided in language resource file \"{file}\" does not exist "
                f"in the main resource file \"{base_file}\""
            ),
            resource=name,
            severity=Severity.WARNING,
        )


__all__ = ["ErrorTemplate"]
