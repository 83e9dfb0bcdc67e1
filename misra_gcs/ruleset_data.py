"""
MISRA guideline catalogues

One table per rule set version: (code, default category, headline).
Category letters: M = Mandatory, R = Required, A = Advisory,
D = Document (MISRA C++:2008 only, treated as Required).

Rows are in the rule set's canonical order; do not sort.
"""

# ═══════════════════════════════════════════════════════════════════════
#  MISRA C:2012
# ═══════════════════════════════════════════════════════════════════════

MISRA_C_2012 = (
    # ── Directives ──
    ("Dir 1.1", "R", "Any implementation-defined behaviour on which the output of the program depends shall be documented and understood"),
    ("Dir 2.1", "R", "All source files shall compile without any compilation errors"),
    ("Dir 3.1", "R", "All code shall be traceable to documented requirements"),
    ("Dir 4.1", "R", "Run-time failures shall be minimized"),
    ("Dir 4.2", "A", "All usage of assembly language should be documented"),
    ("Dir 4.3", "R", "Assembly language shall be encapsulated and isolated"),
    ("Dir 4.4", "A", "Sections of code should not be \"commented out\""),
    ("Dir 4.5", "A", "Identifiers in the same name space with overlapping visibility should be typographically unambiguous"),
    ("Dir 4.6", "A", "typedefs that indicate size and signedness should be used in place of the basic numerical types"),
    ("Dir 4.7", "R", "If a function returns error information, then that error information shall be tested"),
    ("Dir 4.8", "A", "If a pointer to a structure or union is never dereferenced within a translation unit, then the implementation of the object should be hidden"),
    ("Dir 4.9", "A", "A function should be used in preference to a function-like macro where they are interchangeable"),
    ("Dir 4.10", "R", "Precautions shall be taken in order to prevent the contents of a header file being included more than once"),
    ("Dir 4.11", "R", "The validity of values passed to library functions shall be checked"),
    ("Dir 4.12", "R", "Dynamic memory allocation shall not be used"),
    ("Dir 4.13", "A", "Functions which are designed to provide operations on a resource should be called in an appropriate sequence"),
    # ── Rules ──
    ("Rule 1.1", "R", "The program shall contain no violations of the standard C syntax and constraints, and shall not exceed the implementation's translation limits"),
    ("Rule 1.2", "A", "Language extensions should not be used"),
    ("Rule 1.3", "R", "There shall be no occurrence of undefined or critical unspecified behaviour"),
    ("Rule 2.1", "R", "A project shall not contain unreachable code"),
    ("Rule 2.2", "R", "There shall be no dead code"),
    ("Rule 2.3", "A", "A project should not contain unused type declarations"),
    ("Rule 2.4", "A", "A project should not contain unused tag declarations"),
    ("Rule 2.5", "A", "A project should not contain unused macro declarations"),
    ("Rule 2.6", "A", "A function should not contain unused label declarations"),
    ("Rule 2.7", "A", "There should be no unused parameters in functions"),
    ("Rule 3.1", "R", "The character sequences /* and // shall not be used within a comment"),
    ("Rule 3.2", "R", "Line-splicing shall not be used in // comments"),
    ("Rule 4.1", "R", "Octal and hexadecimal escape sequences shall be terminated"),
    ("Rule 4.2", "A", "Trigraphs should not be used"),
    ("Rule 5.1", "R", "External identifiers shall be distinct"),
    ("Rule 5.2", "R", "Identifiers declared in the same scope and name space shall be distinct"),
    ("Rule 5.3", "R", "An identifier declared in an inner scope shall not hide an identifier declared in an outer scope"),
    ("Rule 5.4", "R", "Macro identifiers shall be distinct"),
    ("Rule 5.5", "R", "Identifiers shall be distinct from macro names"),
    ("Rule 5.6", "R", "A typedef name shall be a unique identifier"),
    ("Rule 5.7", "R", "A tag name shall be a unique identifier"),
    ("Rule 5.8", "R", "Identifiers that define objects or functions with external linkage shall be unique"),
    ("Rule 5.9", "A", "Identifiers that define objects or functions with internal linkage should be unique"),
    ("Rule 6.1", "R", "Bit-fields shall only be declared with an appropriate type"),
    ("Rule 6.2", "R", "Single-bit named bit fields shall not be of a signed type"),
    ("Rule 7.1", "R", "Octal constants shall not be used"),
    ("Rule 7.2", "R", "A \"u\" or \"U\" suffix shall be applied to all integer constants that are represented in an unsigned type"),
    ("Rule 7.3", "R", "The lowercase character \"l\" shall not be used in a literal suffix"),
    ("Rule 7.4", "R", "A string literal shall not be assigned to an object unless the object's type is \"pointer to const-qualified char\""),
    ("Rule 8.1", "R", "Types shall be explicitly specified"),
    ("Rule 8.2", "R", "Function types shall be in prototype form with named parameters"),
    ("Rule 8.3", "R", "All declarations of an object or function shall use the same names and type qualifiers"),
    ("Rule 8.4", "R", "A compatible declaration shall be visible when an object or function with external linkage is defined"),
    ("Rule 8.5", "R", "An external object or function shall be declared once in one and only one file"),
    ("Rule 8.6", "R", "An identifier with external linkage shall have exactly one external definition"),
    ("Rule 8.7", "A", "Functions and objects should not be defined with external linkage if they are referenced in only one translation unit"),
    ("Rule 8.8", "R", "The static storage class specifier shall be used in all declarations of objects and functions that have internal linkage"),
    ("Rule 8.9", "A", "An object should be defined at block scope if its identifier only appears in a single function"),
    ("Rule 8.10", "R", "An inline function shall be declared with the static storage class"),
    ("Rule 8.11", "A", "When an array with external linkage is declared, its size should be explicitly specified"),
    ("Rule 8.12", "R", "Within an enumerator list, the value of an implicitly-specified enumeration constant shall be unique"),
    ("Rule 8.13", "A", "A pointer should point to a const-qualified type whenever possible"),
    ("Rule 8.14", "R", "The restrict type qualifier shall not be used"),
    ("Rule 9.1", "M", "The value of an object with automatic storage duration shall not be read before it has been set"),
    ("Rule 9.2", "R", "The initializer for an aggregate or union shall be enclosed in braces"),
    ("Rule 9.3", "R", "Arrays shall not be partially initialized"),
    ("Rule 9.4", "R", "An element of an object shall not be initialized more than once"),
    ("Rule 9.5", "R", "Where designated initializers are used to initialize an array object the size of the array shall be specified explicitly"),
    ("Rule 10.1", "R", "Operands shall not be of an inappropriate essential type"),
    ("Rule 10.2", "R", "Expressions of essentially character type shall not be used inappropriately in addition and subtraction operations"),
    ("Rule 10.3", "R", "The value of an expression shall not be assigned to an object with a narrower essential type or of a different essential type category"),
    ("Rule 10.4", "R", "Both operands of an operator in which the usual arithmetic conversions are performed shall have the same essential type category"),
    ("Rule 10.5", "A", "The value of an expression should not be cast to an inappropriate essential type"),
    ("Rule 10.6", "R", "The value of a composite expression shall not be assigned to an object with wider essential type"),
    ("Rule 10.7", "R", "If a composite expression is used as one operand of an operator in which the usual arithmetic conversions are performed then the other operand shall not have wider essential type"),
    ("Rule 10.8", "R", "The value of a composite expression shall not be cast to a different essential type category or a wider essential type"),
    ("Rule 11.1", "R", "Conversions shall not be performed between a pointer to a function and any other type"),
    ("Rule 11.2", "R", "Conversions shall not be performed between a pointer to an incomplete type and any other type"),
    ("Rule 11.3", "R", "A cast shall not be performed between a pointer to object type and a pointer to a different object type"),
    ("Rule 11.4", "A", "A conversion should not be performed between a pointer to object and an integer type"),
    ("Rule 11.5", "A", "A conversion should not be performed from pointer to void into pointer to object"),
    ("Rule 11.6", "R", "A cast shall not be performed between pointer to void and an arithmetic type"),
    ("Rule 11.7", "R", "A cast shall not be performed between pointer to object and a non-integer arithmetic type"),
    ("Rule 11.8", "R", "A cast shall not remove any const or volatile qualification from the type pointed to by a pointer"),
    ("Rule 11.9", "R", "The macro NULL shall be the only permitted form of integer null pointer constant"),
    ("Rule 12.1", "A", "The precedence of operators within expressions should be made explicit"),
    ("Rule 12.2", "R", "The right hand operand of a shift operator shall lie in the range zero to one less than the width in bits of the essential type of the left hand operand"),
    ("Rule 12.3", "A", "The comma operator should not be used"),
    ("Rule 12.4", "A", "Evaluation of constant expressions should not lead to unsigned integer wrap-around"),
    ("Rule 13.1", "R", "Initializer lists shall not contain persistent side effects"),
    ("Rule 13.2", "R", "The value of an expression and its persistent side effects shall be the same under all permitted evaluation orders"),
    ("Rule 13.3", "A", "A full expression containing an increment (++) or decrement (--) operator should have no other potential side effects other than that caused by the increment or decrement operator"),
    ("Rule 13.4", "A", "The result of an assignment operator should not be used"),
    ("Rule 13.5", "R", "The right hand operand of a logical && or || operator shall not contain persistent side effects"),
    ("Rule 13.6", "M", "The operand of the sizeof operator shall not contain any expression which has potential side effects"),
    ("Rule 14.1", "R", "A loop counter shall not have essentially floating type"),
    ("Rule 14.2", "R", "A for loop shall be well-formed"),
    ("Rule 14.3", "R", "Controlling expressions shall not be invariant"),
    ("Rule 14.4", "R", "The controlling expression of an if statement and the controlling expression of an iteration-statement shall have essentially Boolean type"),
    ("Rule 15.1", "A", "The goto statement should not be used"),
    ("Rule 15.2", "R", "The goto statement shall jump to a label declared later in the same function"),
    ("Rule 15.3", "R", "Any label referenced by a goto statement shall be declared in the same block, or in any block enclosing the goto statement"),
    ("Rule 15.4", "A", "There should be no more than one break or goto statement used to terminate any iteration statement"),
    ("Rule 15.5", "A", "A function should have a single point of exit at the end"),
    ("Rule 15.6", "R", "The body of an iteration-statement or a selection-statement shall be a compound-statement"),
    ("Rule 15.7", "R", "All if ... else if constructs shall be terminated with an else statement"),
    ("Rule 16.1", "R", "All switch statements shall be well-formed"),
    ("Rule 16.2", "R", "A switch label shall only be used when the most closely-enclosing compound statement is the body of a switch statement"),
    ("Rule 16.3", "R", "An unconditional break statement shall terminate every switch-clause"),
    ("Rule 16.4", "R", "Every switch statement shall have a default label"),
    ("Rule 16.5", "R", "A default label shall appear as either the first or the last switch label of a switch statement"),
    ("Rule 16.6", "R", "Every switch statement shall have at least two switch-clauses"),
    ("Rule 16.7", "R", "A switch-expression shall not have essentially Boolean type"),
    ("Rule 17.1", "R", "The features of <stdarg.h> shall not be used"),
    ("Rule 17.2", "R", "Functions shall not call themselves, either directly or indirectly"),
    ("Rule 17.3", "M", "A function shall not be declared implicitly"),
    ("Rule 17.4", "M", "All exit paths from a function with non-void return type shall have an explicit return statement with an expression"),
    ("Rule 17.5", "A", "The function argument corresponding to a parameter declared to have an array type shall have an appropriate number of elements"),
    ("Rule 17.6", "M", "The declaration of an array parameter shall not contain the static keyword between the [ ]"),
    ("Rule 17.7", "R", "The value returned by a function having non-void return type shall be used"),
    ("Rule 17.8", "A", "A function parameter should not be modified"),
    ("Rule 18.1", "R", "A pointer resulting from arithmetic on a pointer operand shall address an element of the same array as that pointer operand"),
    ("Rule 18.2", "R", "Subtraction between pointers shall only be applied to pointers that address elements of the same array"),
    ("Rule 18.3", "R", "The relational operators >, >=, < and <= shall not be applied to objects of pointer type except where they point into the same object"),
    ("Rule 18.4", "A", "The +, -, += and -= operators should not be applied to an expression of pointer type"),
    ("Rule 18.5", "A", "Declarations should contain no more than two levels of pointer nesting"),
    ("Rule 18.6", "R", "The address of an object with automatic storage shall not be copied to another object that persists after the first object has ceased to exist"),
    ("Rule 18.7", "R", "Flexible array members shall not be declared"),
    ("Rule 18.8", "R", "Variable-length array types shall not be used"),
    ("Rule 19.1", "M", "An object shall not be assigned or copied to an overlapping object"),
    ("Rule 19.2", "A", "The union keyword should not be used"),
    ("Rule 20.1", "A", "#include directives should only be preceded by preprocessor directives or comments"),
    ("Rule 20.2", "R", "The ', \" or \\ characters and the /* or // character sequences shall not occur in a header file name"),
    ("Rule 20.3", "R", "The #include directive shall be followed by either a <filename> or \"filename\" sequence"),
    ("Rule 20.4", "R", "A macro shall not be defined with the same name as a keyword"),
    ("Rule 20.5", "A", "#undef should not be used"),
    ("Rule 20.6", "R", "Tokens that look like a preprocessing directive shall not occur within a macro argument"),
    ("Rule 20.7", "R", "Expressions resulting from the expansion of macro parameters shall be enclosed in parentheses"),
    ("Rule 20.8", "R", "The controlling expression of a #if or #elif preprocessing directive shall evaluate to 0 or 1"),
    ("Rule 20.9", "R", "All identifiers used in the controlling expression of #if or #elif preprocessing directives shall be #define'd before evaluation"),
    ("Rule 20.10", "A", "The # and ## preprocessor operators should not be used"),
    ("Rule 20.11", "R", "A macro parameter immediately following a # operator shall not immediately be followed by a ## operator"),
    ("Rule 20.12", "R", "A macro parameter used as an operand to the # or ## operators, which is itself subject to further macro replacement, shall only be used as an operand to these operators"),
    ("Rule 20.13", "R", "A line whose first token is # shall be a valid preprocessing directive"),
    ("Rule 20.14", "R", "All #else, #elif and #endif preprocessor directives shall reside in the same file as the #if, #ifdef or #ifndef directive to which they are related"),
    ("Rule 21.1", "R", "#define and #undef shall not be used on a reserved identifier or reserved macro name"),
    ("Rule 21.2", "R", "A reserved identifier or macro name shall not be declared"),
    ("Rule 21.3", "R", "The memory allocation and deallocation functions of <stdlib.h> shall not be used"),
    ("Rule 21.4", "R", "The standard header file <setjmp.h> shall not be used"),
    ("Rule 21.5", "R", "The standard header file <signal.h> shall not be used"),
    ("Rule 21.6", "R", "The Standard Library input/output functions shall not be used"),
    ("Rule 21.7", "R", "The atof, atoi, atol and atoll functions of <stdlib.h> shall not be used"),
    ("Rule 21.8", "R", "The library functions abort, exit, getenv and system of <stdlib.h> shall not be used"),
    ("Rule 21.9", "R", "The library functions bsearch and qsort of <stdlib.h> shall not be used"),
    ("Rule 21.10", "R", "The Standard Library time and date functions shall not be used"),
    ("Rule 21.11", "R", "The standard header file <tgmath.h> shall not be used"),
    ("Rule 21.12", "A", "The exception handling features of <fenv.h> should not be used"),
    ("Rule 22.1", "R", "All resources obtained dynamically by means of Standard Library functions shall be explicitly released"),
    ("Rule 22.2", "M", "A block of memory shall only be freed if it was allocated by means of a Standard Library function"),
    ("Rule 22.3", "R", "The same file shall not be open for read and write access at the same time on different streams"),
    ("Rule 22.4", "M", "There shall be no attempt to write to a stream which has been opened as read-only"),
    ("Rule 22.5", "M", "A pointer to a FILE object shall not be dereferenced"),
    ("Rule 22.6", "M", "The value of a pointer to a FILE shall not be used after the associated stream has been closed"),
)

# ═══════════════════════════════════════════════════════════════════════
#  MISRA C:2004
# ═══════════════════════════════════════════════════════════════════════

MISRA_C_2004 = (
    ("Rule 1.1", "R", "All code shall conform to ISO/IEC 9899:1990 \"Programming languages - C\", amended and corrected by ISO/IEC 9899/COR1:1995, ISO/IEC 9899/AMD1:1995, and ISO/IEC 9899/COR2:1996"),
    ("Rule 1.2", "R", "No reliance shall be placed on undefined or unspecified behaviour"),
    ("Rule 1.3", "R", "Multiple compilers and/or languages shall only be used if there is a common defined interface standard for object code to which the languages/compilers/assemblers conform"),
    ("Rule 1.4", "R", "The compiler/linker shall be checked to ensure that 31 character significance and case sensitivity are supported for external identifiers"),
    ("Rule 1.5", "A", "Floating-point implementations should comply with a defined floating-point standard"),
    ("Rule 2.1", "R", "Assembly language shall be encapsulated and isolated"),
    ("Rule 2.2", "R", "Source code shall only use /* ... */ style comments"),
    ("Rule 2.3", "R", "The character sequence /* shall not be used within a comment"),
    ("Rule 2.4", "A", "Sections of code should not be \"commented out\""),
    ("Rule 3.1", "R", "All usage of implementation-defined behaviour shall be documented"),
    ("Rule 3.2", "R", "The character set and the corresponding encoding shall be documented"),
    ("Rule 3.3", "A", "The implementation of integer division in the chosen compiler should be determined, documented and taken into account"),
    ("Rule 3.4", "R", "All uses of the #pragma directive shall be documented and explained"),
    ("Rule 3.5", "R", "If it is being relied upon, the implementation defined behaviour and packing of bitfields shall be documented"),
    ("Rule 3.6", "R", "All libraries used in production code shall be written to comply with the provisions of this document, and shall have been subject to appropriate validation"),
    ("Rule 4.1", "R", "Only those escape sequences that are defined in the ISO C standard shall be used"),
    ("Rule 4.2", "R", "Trigraphs shall not be used"),
    ("Rule 5.1", "R", "Identifiers (internal and external) shall not rely on the significance of more than 31 characters"),
    ("Rule 5.2", "R", "Identifiers in an inner scope shall not use the same name as an identifier in an outer scope, and therefore hide that identifier"),
    ("Rule 5.3", "R", "A typedef name shall be a unique identifier"),
    ("Rule 5.4", "R", "A tag name shall be a unique identifier"),
    ("Rule 5.5", "A", "No object or function identifier with static storage duration should be reused"),
    ("Rule 5.6", "A", "No identifier in one name space should have the same spelling as an identifier in another name space, with the exception of structure member and union member names"),
    ("Rule 5.7", "A", "No identifier name should be reused"),
    ("Rule 6.1", "R", "The plain char type shall be used only for the storage and use of character values"),
    ("Rule 6.2", "R", "signed and unsigned char type shall be used only for the storage and use of numeric values"),
    ("Rule 6.3", "A", "typedefs that indicate size and signedness should be used in place of the basic types"),
    ("Rule 6.4", "R", "Bit fields shall only be defined to be of type unsigned int or signed int"),
    ("Rule 6.5", "R", "Bit fields of signed type shall be at least 2 bits long"),
    ("Rule 7.1", "R", "Octal constants (other than zero) and octal escape sequences shall not be used"),
    ("Rule 8.1", "R", "Functions shall have prototype declarations and the prototype shall be visible at both the function definition and call"),
    ("Rule 8.2", "R", "Whenever an object or function is declared or defined, its type shall be explicitly stated"),
    ("Rule 8.3", "R", "For each function parameter the type given in the declaration and definition shall be identical, and the return types shall also be identical"),
    ("Rule 8.4", "R", "If objects or functions are declared more than once their types shall be compatible"),
    ("Rule 8.5", "R", "There shall be no definitions of objects or functions in a header file"),
    ("Rule 8.6", "R", "Functions shall be declared at file scope"),
    ("Rule 8.7", "R", "Objects shall be defined at block scope if they are only accessed from within a single function"),
    ("Rule 8.8", "R", "An external object or function shall be declared in one and only one file"),
    ("Rule 8.9", "R", "An identifier with external linkage shall have exactly one external definition"),
    ("Rule 8.10", "R", "All declarations and definitions of objects or functions at file scope shall have internal linkage unless external linkage is required"),
    ("Rule 8.11", "R", "The static storage class specifier shall be used in definitions and declarations of objects and functions that have internal linkage"),
    ("Rule 8.12", "R", "When an array is declared with external linkage, its size shall be stated explicitly or defined implicitly by initialisation"),
    ("Rule 9.1", "R", "All automatic variables shall have been assigned a value before being used"),
    ("Rule 9.2", "R", "Braces shall be used to indicate and match the structure in the non-zero initialisation of arrays and structures"),
    ("Rule 9.3", "R", "In an enumerator list, the \"=\" construct shall not be used to explicitly initialise members other than the first, unless all items are explicitly initialised"),
    ("Rule 10.1", "R", "The value of an expression of integer type shall not be implicitly converted to a different underlying type under certain conditions"),
    ("Rule 10.2", "R", "The value of an expression of floating type shall not be implicitly converted to a different type under certain conditions"),
    ("Rule 10.3", "R", "The value of a complex expression of integer type shall only be cast to a type of the same signedness that is no wider than the underlying type of the expression"),
    ("Rule 10.4", "R", "The value of a complex expression of floating type shall only be cast to a floating type that is narrower or of the same size"),
    ("Rule 10.5", "R", "If the bitwise operators ~ and << are applied to an operand of underlying type unsigned char or unsigned short, the result shall be immediately cast to the underlying type of the operand"),
    ("Rule 10.6", "R", "A \"U\" suffix shall be applied to all constants of unsigned type"),
    ("Rule 11.1", "R", "Conversions shall not be performed between a pointer to a function and any type other than an integral type"),
    ("Rule 11.2", "R", "Conversions shall not be performed between a pointer to object and any type other than an integral type, another pointer to object type or a pointer to void"),
    ("Rule 11.3", "A", "A cast should not be performed between a pointer type and an integral type"),
    ("Rule 11.4", "A", "A cast should not be performed between a pointer to object type and a different pointer to object type"),
    ("Rule 11.5", "R", "A cast shall not be performed that removes any const or volatile qualification from the type addressed by a pointer"),
    ("Rule 12.1", "A", "Limited dependence should be placed on C's operator precedence rules in expressions"),
    ("Rule 12.2", "R", "The value of an expression shall be the same under any order of evaluation that the standard permits"),
    ("Rule 12.3", "R", "The sizeof operator shall not be used on expressions that contain side effects"),
    ("Rule 12.4", "R", "The right-hand operand of a logical && or || operator shall not contain side effects"),
    ("Rule 12.5", "R", "The operands of a logical && or || shall be primary-expressions"),
    ("Rule 12.6", "A", "The operands of logical operators (&&, || and !) should be effectively Boolean"),
    ("Rule 12.7", "R", "Bitwise operators shall not be applied to operands whose underlying type is signed"),
    ("Rule 12.8", "R", "The right-hand operand of a shift operator shall lie between zero and one less than the width in bits of the underlying type of the left-hand operand"),
    ("Rule 12.9", "R", "The unary minus operator shall not be applied to an expression whose underlying type is unsigned"),
    ("Rule 12.10", "R", "The comma operator shall not be used"),
    ("Rule 12.11", "A", "Evaluation of constant unsigned integer expressions should not lead to wrap-around"),
    ("Rule 12.12", "R", "The underlying bit representations of floating-point values shall not be used"),
    ("Rule 12.13", "A", "The increment (++) and decrement (--) operators should not be mixed with other operators in an expression"),
    ("Rule 13.1", "R", "Assignment operators shall not be used in expressions that yield a Boolean value"),
    ("Rule 13.2", "A", "Tests of a value against zero should be made explicit, unless the operand is effectively Boolean"),
    ("Rule 13.3", "R", "Floating-point expressions shall not be tested for equality or inequality"),
    ("Rule 13.4", "R", "The controlling expression of a for statement shall not contain any objects of floating type"),
    ("Rule 13.5", "R", "The three expressions of a for statement shall be concerned only with loop control"),
    ("Rule 13.6", "R", "Numeric variables being used within a for loop for iteration counting shall not be modified in the body of the loop"),
    ("Rule 13.7", "R", "Boolean operations whose results are invariant shall not be permitted"),
    ("Rule 14.1", "R", "There shall be no unreachable code"),
    ("Rule 14.2", "R", "All non-null statements shall either have at least one side effect however executed, or cause control flow to change"),
    ("Rule 14.3", "R", "Before preprocessing, a null statement shall only occur on a line by itself"),
    ("Rule 14.4", "R", "The goto statement shall not be used"),
    ("Rule 14.5", "R", "The continue statement shall not be used"),
    ("Rule 14.6", "R", "For any iteration statement there shall be at most one break statement used for loop termination"),
    ("Rule 14.7", "R", "A function shall have a single point of exit at the end of the function"),
    ("Rule 14.8", "R", "The statement forming the body of a switch, while, do ... while or for statement shall be a compound statement"),
    ("Rule 14.9", "R", "An if (expression) construct shall be followed by a compound statement. The else keyword shall be followed by either a compound statement, or another if statement"),
    ("Rule 14.10", "R", "All if ... else if constructs shall be terminated with an else clause"),
    ("Rule 15.0", "R", "The MISRA C switch syntax shall be used"),
    ("Rule 15.1", "R", "A switch label shall only be used when the most closely-enclosing compound statement is the body of a switch statement"),
    ("Rule 15.2", "R", "An unconditional break statement shall terminate every non-empty switch clause"),
    ("Rule 15.3", "R", "The final clause of a switch statement shall be the default clause"),
    ("Rule 15.4", "R", "A switch expression shall not represent a value that is effectively Boolean"),
    ("Rule 15.5", "R", "Every switch statement shall have at least one case clause"),
    ("Rule 16.1", "R", "Functions shall not be defined with a variable number of arguments"),
    ("Rule 16.2", "R", "Functions shall not call themselves, either directly or indirectly"),
    ("Rule 16.3", "R", "Identifiers shall be given for all of the parameters in a function prototype declaration"),
    ("Rule 16.4", "R", "The identifiers used in the declaration and definition of a function shall be identical"),
    ("Rule 16.5", "R", "Functions with no parameters shall be declared and defined with the parameter list void"),
    ("Rule 16.6", "R", "The number of arguments passed to a function shall match the number of parameters"),
    ("Rule 16.7", "A", "A pointer parameter in a function prototype should be declared as pointer to const if the pointer is not used to modify the addressed object"),
    ("Rule 16.8", "R", "All exit paths from a function with non-void return type shall have an explicit return statement with an expression"),
    ("Rule 16.9", "R", "A function identifier shall only be used with either a preceding &, or with a parenthesised parameter list, which may be empty"),
    ("Rule 16.10", "R", "If a function returns error information, then that error information shall be tested"),
    ("Rule 17.1", "R", "Pointer arithmetic shall only be applied to pointers that address an array or array element"),
    ("Rule 17.2", "R", "Pointer subtraction shall only be applied to pointers that address elements of the same array"),
    ("Rule 17.3", "R", ">, >=, <, <= shall not be applied to pointer types except where they point to the same array"),
    ("Rule 17.4", "R", "Array indexing shall be the only allowed form of pointer arithmetic"),
    ("Rule 17.5", "A", "The declaration of objects should contain no more than 2 levels of pointer indirection"),
    ("Rule 17.6", "R", "The address of an object with automatic storage shall not be assigned to another object that may persist after the first object has ceased to exist"),
    ("Rule 18.1", "R", "All structure and union types shall be complete at the end of a translation unit"),
    ("Rule 18.2", "R", "An object shall not be assigned to an overlapping object"),
    ("Rule 18.3", "R", "An area of memory shall not be reused for unrelated purposes"),
    ("Rule 18.4", "R", "Unions shall not be used"),
    ("Rule 19.1", "A", "#include statements in a file should only be preceded by other preprocessor directives or comments"),
    ("Rule 19.2", "A", "Non-standard characters should not occur in header file names in #include directives"),
    ("Rule 19.3", "R", "The #include directive shall be followed by either a <filename> or \"filename\" sequence"),
    ("Rule 19.4", "R", "C macros shall only expand to a braced initialiser, a constant, a string literal, a parenthesised expression, a type qualifier, a storage class specifier, or a do-while-zero construct"),
    ("Rule 19.5", "R", "Macros shall not be #define'd or #undef'd within a block"),
    ("Rule 19.6", "R", "#undef shall not be used"),
    ("Rule 19.7", "A", "A function should be used in preference to a function-like macro"),
    ("Rule 19.8", "R", "A function-like macro shall not be invoked without all of its arguments"),
    ("Rule 19.9", "R", "Arguments to a function-like macro shall not contain tokens that look like preprocessing directives"),
    ("Rule 19.10", "R", "In the definition of a function-like macro each instance of a parameter shall be enclosed in parentheses unless it is used as the operand of # or ##"),
    ("Rule 19.11", "R", "All macro identifiers in preprocessor directives shall be defined before use, except in #ifdef and #ifndef preprocessor directives and the defined() operator"),
    ("Rule 19.12", "R", "There shall be at most one occurrence of the # or ## operators in a single macro definition"),
    ("Rule 19.13", "A", "The # and ## operators should not be used"),
    ("Rule 19.14", "R", "The defined preprocessor operator shall only be used in one of the two standard forms"),
    ("Rule 19.15", "R", "Precautions shall be taken in order to prevent the contents of a header file being included twice"),
    ("Rule 19.16", "R", "Preprocessing directives shall be syntactically meaningful even when excluded by the preprocessor"),
    ("Rule 19.17", "R", "All #else, #elif and #endif preprocessor directives shall reside in the same file as the #if or #ifdef directive to which they are related"),
    ("Rule 20.1", "R", "Reserved identifiers, macros and functions in the standard library, shall not be defined, redefined or undefined"),
    ("Rule 20.2", "R", "The names of standard library macros, objects and functions shall not be reused"),
    ("Rule 20.3", "R", "The validity of values passed to library functions shall be checked"),
    ("Rule 20.4", "R", "Dynamic heap memory allocation shall not be used"),
    ("Rule 20.5", "R", "The error indicator errno shall not be used"),
    ("Rule 20.6", "R", "The macro offsetof, in library <stddef.h>, shall not be used"),
    ("Rule 20.7", "R", "The setjmp macro and the longjmp function shall not be used"),
    ("Rule 20.8", "R", "The signal handling facilities of <signal.h> shall not be used"),
    ("Rule 20.9", "R", "The input/output library <stdio.h> shall not be used in production code"),
    ("Rule 20.10", "R", "The library functions atof, atoi and atol from library <stdlib.h> shall not be used"),
    ("Rule 20.11", "R", "The library functions abort, exit, getenv and system from library <stdlib.h> shall not be used"),
    ("Rule 20.12", "R", "The time handling functions of library <time.h> shall not be used"),
    ("Rule 21.1", "R", "Minimisation of run-time failures shall be ensured by the use of at least one of static analysis tools/techniques, dynamic analysis tools/techniques, or explicit coding of checks to handle run-time faults"),
)

# ═══════════════════════════════════════════════════════════════════════
#  MISRA C++:2008
# ═══════════════════════════════════════════════════════════════════════

MISRA_CPP_2008 = (
    ("Rule 0-1-1", "R", "A project shall not contain unreachable code"),
    ("Rule 0-1-2", "R", "A project shall not contain infeasible paths"),
    ("Rule 0-1-3", "R", "A project shall not contain unused variables"),
    ("Rule 0-1-4", "R", "A project shall not contain non-volatile POD variables having only one use"),
    ("Rule 0-1-5", "R", "A project shall not contain unused type declarations"),
    ("Rule 0-1-6", "R", "A project shall not contain instances of non-volatile variables being given values that are never subsequently used"),
    ("Rule 0-1-7", "R", "The value returned by a function having a non-void return type that is not an overloaded operator shall always be used"),
    ("Rule 0-1-8", "R", "All functions with void return type shall have external side effect(s)"),
    ("Rule 0-1-9", "R", "There shall be no dead code"),
    ("Rule 0-1-10", "R", "Every defined function shall be called at least once"),
    ("Rule 0-1-11", "R", "There shall be no unused parameters (named or unnamed) in non-virtual functions"),
    ("Rule 0-1-12", "R", "There shall be no unused parameters (named or unnamed) in the set of parameters for a virtual function and all the functions that override it"),
    ("Rule 0-2-1", "R", "An object shall not be assigned to an overlapping object"),
    ("Rule 0-3-1", "D", "Minimization of run-time failures shall be ensured by the use of at least one of static analysis tools/techniques, dynamic analysis tools/techniques, or explicit coding of checks to handle run-time faults"),
    ("Rule 0-3-2", "R", "If a function generates error information, then that error information shall be tested"),
    ("Rule 0-4-1", "D", "Use of scaled-integer or fixed-point arithmetic shall be documented"),
    ("Rule 0-4-2", "D", "Use of floating-point arithmetic shall be documented"),
    ("Rule 0-4-3", "D", "Floating-point implementations shall comply with a defined floating-point standard"),
    ("Rule 1-0-1", "R", "All code shall conform to ISO/IEC 14882:2003 \"The C++ Standard Incorporating Technical Corrigendum 1\""),
    ("Rule 1-0-2", "D", "Multiple compilers shall only be used if they have a common, defined interface"),
    ("Rule 1-0-3", "D", "The implementation of integer division in the chosen compiler shall be determined and documented"),
    ("Rule 2-2-1", "D", "The character set and the corresponding encoding shall be documented"),
    ("Rule 2-3-1", "R", "Trigraphs shall not be used"),
    ("Rule 2-5-1", "A", "Digraphs should not be used"),
    ("Rule 2-7-1", "R", "The character sequence /* shall not be used within a C-style comment"),
    ("Rule 2-7-2", "R", "Sections of code shall not be \"commented out\" using C-style comments"),
    ("Rule 2-7-3", "A", "Sections of code should not be \"commented out\" using C++ comments"),
    ("Rule 2-10-1", "R", "Different identifiers shall be typographically unambiguous"),
    ("Rule 2-10-2", "R", "Identifiers declared in an inner scope shall not hide an identifier declared in an outer scope"),
    ("Rule 2-10-3", "R", "A typedef name (including qualification, if any) shall be a unique identifier"),
    ("Rule 2-10-4", "R", "A class, union or enum name (including qualification, if any) shall be a unique identifier"),
    ("Rule 2-10-5", "A", "The identifier name of a non-member object or function with static storage duration should not be reused"),
    ("Rule 2-10-6", "R", "If an identifier refers to a type, it shall not also refer to an object or a function in the same scope"),
    ("Rule 2-13-1", "R", "Only those escape sequences that are defined in ISO/IEC 14882:2003 shall be used"),
    ("Rule 2-13-2", "R", "Octal constants (other than zero) and octal escape sequences (other than \"\\0\") shall not be used"),
    ("Rule 2-13-3", "R", "A \"U\" suffix shall be applied to all octal or hexadecimal integer literals of unsigned type"),
    ("Rule 2-13-4", "R", "Literal suffixes shall be upper case"),
    ("Rule 2-13-5", "R", "Narrow and wide string literals shall not be concatenated"),
    ("Rule 3-1-1", "R", "It shall be possible to include any header file in multiple translation units without violating the One Definition Rule"),
    ("Rule 3-1-2", "R", "Functions shall not be declared at block scope"),
    ("Rule 3-1-3", "R", "When an array is declared, its size shall either be stated explicitly or defined implicitly by initialization"),
    ("Rule 3-2-1", "R", "All declarations of an object or function shall have compatible types"),
    ("Rule 3-2-2", "R", "The One Definition Rule shall not be violated"),
    ("Rule 3-2-3", "R", "A type, object or function that is used in multiple translation units shall be declared in one and only one file"),
    ("Rule 3-2-4", "R", "An identifier with external linkage shall have exactly one definition"),
    ("Rule 3-3-1", "R", "Objects or functions with external linkage shall be declared in a header file"),
    ("Rule 3-3-2", "R", "If a function has internal linkage then all re-declarations shall include the static storage class specifier"),
    ("Rule 3-4-1", "R", "An identifier declared to be an object or type shall be defined in a block that minimizes its visibility"),
    ("Rule 3-9-1", "R", "The types used for an object, a function return type, or a function parameter shall be token-for-token identical in all declarations and re-declarations"),
    ("Rule 3-9-2", "A", "typedefs that indicate size and signedness should be used in place of the basic numerical types"),
    ("Rule 3-9-3", "R", "The underlying bit representations of floating-point values shall not be used"),
    ("Rule 4-5-1", "R", "Expressions with type bool shall not be used as operands to built-in operators other than =, &&, ||, !, ==, !=, the unary & operator, and the conditional operator"),
    ("Rule 4-5-2", "R", "Expressions with type enum shall not be used as operands to built-in operators other than [ ], =, ==, !=, the unary & operator, and the relational operators"),
    ("Rule 4-5-3", "R", "Expressions with type (plain) char and wchar_t shall not be used as operands to built-in operators other than =, ==, != and the unary & operator"),
    ("Rule 4-10-1", "R", "NULL shall not be used as an integer value"),
    ("Rule 4-10-2", "R", "Literal zero (0) shall not be used as the null-pointer-constant"),
    ("Rule 5-0-1", "R", "The value of an expression shall be the same under any order of evaluation that the standard permits"),
    ("Rule 5-0-2", "A", "Limited dependence should be placed on C++ operator precedence rules in expressions"),
    ("Rule 5-0-3", "R", "A cvalue expression shall not be implicitly converted to a different underlying type"),
    ("Rule 5-0-4", "R", "An implicit integral conversion shall not change the signedness of the underlying type"),
    ("Rule 5-0-5", "R", "There shall be no implicit floating-integral conversions"),
    ("Rule 5-0-6", "R", "An implicit integral or floating-point conversion shall not reduce the size of the underlying type"),
    ("Rule 5-0-7", "R", "There shall be no explicit floating-integral conversions of a cvalue expression"),
    ("Rule 5-0-8", "R", "An explicit integral or floating-point conversion shall not increase the size of the underlying type of a cvalue expression"),
    ("Rule 5-0-9", "R", "An explicit integral conversion shall not change the signedness of the underlying type of a cvalue expression"),
    ("Rule 5-0-10", "R", "If the bitwise operators ~ and << are applied to an operand with an underlying type of unsigned char or unsigned short, the result shall be immediately cast to the underlying type of the operand"),
    ("Rule 5-0-11", "R", "The plain char type shall only be used for the storage and use of character values"),
    ("Rule 5-0-12", "R", "signed char and unsigned char type shall only be used for the storage and use of numeric values"),
    ("Rule 5-0-13", "R", "The condition of an if-statement and the condition of an iteration-statement shall have type bool"),
    ("Rule 5-0-14", "R", "The first operand of a conditional-operator shall have type bool"),
    ("Rule 5-0-15", "R", "Array indexing shall be the only form of pointer arithmetic"),
    ("Rule 5-0-16", "R", "A pointer operand and any pointer resulting from pointer arithmetic using that operand shall both address elements of the same array"),
    ("Rule 5-0-17", "R", "Subtraction between pointers shall only be applied to pointers that address elements of the same array"),
    ("Rule 5-0-18", "R", ">, >=, <, <= shall not be applied to objects of pointer type, except where they point to the same array"),
    ("Rule 5-0-19", "R", "The declaration of objects shall contain no more than two levels of pointer indirection"),
    ("Rule 5-0-20", "R", "Non-constant operands to a binary bitwise operator shall have the same underlying type"),
    ("Rule 5-0-21", "R", "Bitwise operators shall only be applied to operands of unsigned underlying type"),
    ("Rule 5-2-1", "R", "Each operand of a logical && or || shall be a postfix-expression"),
    ("Rule 5-2-2", "R", "A pointer to a virtual base class shall only be cast to a pointer to a derived class by means of dynamic_cast"),
    ("Rule 5-2-3", "A", "Casts from a base class to a derived class should not be performed on polymorphic types"),
    ("Rule 5-2-4", "R", "C-style casts (other than void casts) and functional notation casts (other than explicit constructor calls) shall not be used"),
    ("Rule 5-2-5", "R", "A cast shall not remove any const or volatile qualification from the type of a pointer or reference"),
    ("Rule 5-2-6", "R", "A cast shall not convert a pointer to a function to any other pointer type, including a pointer to function type"),
    ("Rule 5-2-7", "R", "An object with pointer type shall not be converted to an unrelated pointer type, either directly or indirectly"),
    ("Rule 5-2-8", "R", "An object with integer type or pointer to void type shall not be converted to an object with pointer type"),
    ("Rule 5-2-9", "A", "A cast should not convert a pointer type to an integral type"),
    ("Rule 5-2-10", "A", "The increment (++) and decrement (--) operators should not be mixed with other operators in an expression"),
    ("Rule 5-2-11", "R", "The comma operator, && operator and the || operator shall not be overloaded"),
    ("Rule 5-2-12", "R", "An identifier with array type passed as a function argument shall not decay to a pointer"),
    ("Rule 5-3-1", "R", "Each operand of the ! operator, the logical && or the logical || operators shall have type bool"),
    ("Rule 5-3-2", "R", "The unary minus operator shall not be applied to an expression whose underlying type is unsigned"),
    ("Rule 5-3-3", "R", "The unary & operator shall not be overloaded"),
    ("Rule 5-3-4", "R", "Evaluation of the operand to the sizeof operator shall not contain side effects"),
    ("Rule 5-8-1", "R", "The right hand operand of a shift operator shall lie between zero and one less than the width in bits of the underlying type of the left hand operand"),
    ("Rule 5-14-1", "R", "The right hand operand of a logical && or || operator shall not contain side effects"),
    ("Rule 5-17-1", "R", "The semantic equivalence between a binary operator and its assignment operator form shall be preserved"),
    ("Rule 5-18-1", "R", "The comma operator shall not be used"),
    ("Rule 5-19-1", "A", "Evaluation of constant unsigned integer expressions should not lead to wrap-around"),
    ("Rule 6-2-1", "R", "Assignment operators shall not be used in sub-expressions"),
    ("Rule 6-2-2", "R", "Floating-point expressions shall not be directly or indirectly tested for equality or inequality"),
    ("Rule 6-2-3", "R", "Before preprocessing, a null statement shall only occur on a line by itself; it may be followed by a comment, provided that the first character following the null statement is a white-space character"),
    ("Rule 6-3-1", "R", "The statement forming the body of a switch, while, do ... while or for statement shall be a compound statement"),
    ("Rule 6-4-1", "R", "An if ( condition ) construct shall be followed by a compound statement. The else keyword shall be followed by either a compound statement, or another if statement"),
    ("Rule 6-4-2", "R", "All if ... else if constructs shall be terminated with an else clause"),
    ("Rule 6-4-3", "R", "A switch statement shall be a well-formed switch statement"),
    ("Rule 6-4-4", "R", "A switch-label shall only be used when the most closely-enclosing compound statement is the body of a switch statement"),
    ("Rule 6-4-5", "R", "An unconditional throw or break statement shall terminate every non-empty switch-clause"),
    ("Rule 6-4-6", "R", "The final clause of a switch statement shall be the default-clause"),
    ("Rule 6-4-7", "R", "The condition of a switch statement shall not have bool type"),
    ("Rule 6-4-8", "R", "Every switch statement shall have at least one case-clause"),
    ("Rule 6-5-1", "R", "A for loop shall contain a single loop-counter which shall not have floating type"),
    ("Rule 6-5-2", "R", "If loop-counter is not modified by -- or ++, then, within condition, the loop-counter shall only be used as an operand to <=, <, > or >="),
    ("Rule 6-5-3", "R", "The loop-counter shall not be modified within condition or statement"),
    ("Rule 6-5-4", "R", "The loop-counter shall be modified by one of: --, ++, -=n, or +=n; where n remains constant for the duration of the loop"),
    ("Rule 6-5-5", "R", "A loop-control-variable other than the loop-counter shall not be modified within condition or expression"),
    ("Rule 6-5-6", "R", "A loop-control-variable other than the loop-counter which is modified in statement shall have type bool"),
    ("Rule 6-6-1", "R", "Any label referenced by a goto statement shall be declared in the same block, or in a block enclosing the goto statement"),
    ("Rule 6-6-2", "R", "The goto statement shall jump to a label declared later in the same function body"),
    ("Rule 6-6-3", "R", "The continue statement shall only be used within a well-formed for loop"),
    ("Rule 6-6-4", "R", "For any iteration statement there shall be no more than one break or goto statement used for loop termination"),
    ("Rule 6-6-5", "R", "A function shall have a single point of exit at the end of the function"),
    ("Rule 7-1-1", "R", "A variable which is not modified shall be const qualified"),
    ("Rule 7-1-2", "R", "A pointer or reference parameter in a function shall be declared as pointer to const or reference to const if the corresponding object is not modified"),
    ("Rule 7-2-1", "R", "An expression with enum underlying type shall only have values corresponding to the enumerators of the enumeration"),
    ("Rule 7-3-1", "R", "The global namespace shall only contain main, namespace declarations and extern \"C\" declarations"),
    ("Rule 7-3-2", "R", "The identifier main shall not be used for a function other than the global function main"),
    ("Rule 7-3-3", "R", "There shall be no unnamed namespaces in header files"),
    ("Rule 7-3-4", "R", "using-directives shall not be used"),
    ("Rule 7-3-5", "R", "Multiple declarations for an identifier in the same namespace shall not straddle a using-declaration for that identifier"),
    ("Rule 7-3-6", "R", "using-directives and using-declarations (excluding class scope or function scope using-declarations) shall not be used in header files"),
    ("Rule 7-4-1", "D", "All usage of assembler shall be documented"),
    ("Rule 7-4-2", "R", "Assembler instructions shall only be introduced using the asm declaration"),
    ("Rule 7-4-3", "R", "Assembly language shall be encapsulated and isolated"),
    ("Rule 7-5-1", "R", "A function shall not return a reference or a pointer to an automatic variable (including parameters), defined within the function"),
    ("Rule 7-5-2", "R", "The address of an object with automatic storage shall not be assigned to another object that may persist after the first object has ceased to exist"),
    ("Rule 7-5-3", "R", "A function shall not return a reference or a pointer to a parameter that is passed by reference or const reference"),
    ("Rule 7-5-4", "A", "Functions should not call themselves, either directly or indirectly"),
    ("Rule 8-0-1", "R", "An init-declarator-list or a member-declarator-list shall consist of a single init-declarator or member-declarator respectively"),
    ("Rule 8-3-1", "R", "Parameters in an overriding virtual function shall either use the same default arguments as the function they override, or else shall not specify any default arguments"),
    ("Rule 8-4-1", "R", "Functions shall not be defined using the ellipsis notation"),
    ("Rule 8-4-2", "R", "The identifiers used for the parameters in a re-declaration of a function shall be identical to those in the declaration"),
    ("Rule 8-4-3", "R", "All exit paths from a function with non-void return type shall have an explicit return statement with an expression"),
    ("Rule 8-4-4", "R", "A function identifier shall either be used to call the function or it shall be preceded by &"),
    ("Rule 8-5-1", "R", "All variables shall have a defined value before they are used"),
    ("Rule 8-5-2", "R", "Braces shall be used to indicate and match the structure in the non-zero initialization of arrays and structures"),
    ("Rule 8-5-3", "R", "In an enumerator list, the = construct shall not be used to explicitly initialize members other than the first, unless all items are explicitly initialized"),
    ("Rule 9-3-1", "R", "const member functions shall not return non-const pointers or references to class-data"),
    ("Rule 9-3-2", "R", "Member functions shall not return non-const handles to class-data"),
    ("Rule 9-3-3", "R", "If a member function can be made static then it shall be made static, otherwise if it can be made const then it shall be made const"),
    ("Rule 9-5-1", "R", "Unions shall not be used"),
    ("Rule 9-6-1", "D", "When the absolute positioning of bits representing a bit-field is required, then the behaviour and packing of bit-fields shall be documented"),
    ("Rule 9-6-2", "R", "Bit-fields shall be either bool type or an explicitly unsigned or signed integral type"),
    ("Rule 9-6-3", "R", "Bit-fields shall not have enum type"),
    ("Rule 9-6-4", "R", "Named bit-fields with signed integer type shall have a length of more than one bit"),
    ("Rule 10-1-1", "A", "Classes should not be derived from virtual bases"),
    ("Rule 10-1-2", "R", "A base class shall only be declared virtual if it is used in a diamond hierarchy"),
    ("Rule 10-1-3", "R", "An accessible base class shall not be both virtual and non-virtual in the same hierarchy"),
    ("Rule 10-2-1", "A", "All accessible entity names within a multiple inheritance hierarchy should be unique"),
    ("Rule 10-3-1", "R", "There shall be no more than one definition of each virtual function on each path through the inheritance hierarchy"),
    ("Rule 10-3-2", "R", "Each overriding virtual function shall be declared with the virtual keyword"),
    ("Rule 10-3-3", "R", "A virtual function shall only be overridden by a pure virtual function if it is itself declared as pure virtual"),
    ("Rule 11-0-1", "R", "Member data in non-POD class types shall be private"),
    ("Rule 12-1-1", "R", "An object's dynamic type shall not be used from the body of its constructor or destructor"),
    ("Rule 12-1-2", "A", "All constructors of a class should explicitly call a constructor for all of its immediate base classes and all virtual base classes"),
    ("Rule 12-1-3", "R", "All constructors that are callable with a single argument of fundamental type shall be declared explicit"),
    ("Rule 12-8-1", "R", "A copy constructor shall only initialize its base classes and the non-static members of the class of which it is a member"),
    ("Rule 12-8-2", "R", "The copy assignment operator shall be declared protected or private in an abstract class"),
    ("Rule 14-5-1", "R", "A non-member generic function shall only be declared in a namespace that is not an associated namespace"),
    ("Rule 14-5-2", "R", "A copy constructor shall be declared when there is a template constructor with a single parameter that is a generic parameter"),
    ("Rule 14-5-3", "R", "A copy assignment operator shall be declared when there is a template assignment operator with a parameter that is a generic parameter"),
    ("Rule 14-6-1", "R", "In a class template with a dependent base, any name that may be found in that dependent base shall be referred to using a qualified-id or this->"),
    ("Rule 14-6-2", "R", "The function chosen by overload resolution shall resolve to a function declared previously in the translation unit"),
    ("Rule 14-7-1", "R", "All class templates, function templates, class template member functions and class template static members shall be instantiated at least once"),
    ("Rule 14-7-2", "R", "For any given template specialization, an explicit instantiation of the template with the template-arguments used in the specialization shall not render the program ill-formed"),
    ("Rule 14-7-3", "R", "All partial and explicit specializations for a template shall be declared in the same file as the declaration of their primary template"),
    ("Rule 14-8-1", "R", "Overloaded function templates shall not be explicitly specialized"),
    ("Rule 14-8-2", "A", "The viable function set for a function call should either contain no function specializations, or only contain function specializations"),
    ("Rule 15-0-1", "D", "Exceptions shall only be used for error handling"),
    ("Rule 15-0-2", "A", "An exception object should not have pointer type"),
    ("Rule 15-0-3", "R", "Control shall not be transferred into a try or catch block using a goto or a switch statement"),
    ("Rule 15-1-1", "R", "The assignment-expression of a throw statement shall not itself cause an exception to be thrown"),
    ("Rule 15-1-2", "R", "NULL shall not be thrown explicitly"),
    ("Rule 15-1-3", "R", "An empty throw (throw;) shall only be used in the compound-statement of a catch handler"),
    ("Rule 15-3-1", "R", "Exceptions shall be raised only after start-up and before termination of the program"),
    ("Rule 15-3-2", "A", "There should be at least one exception handler to catch all otherwise unhandled exceptions"),
    ("Rule 15-3-3", "R", "Handlers of a function-try-block implementation of a class constructor or destructor shall not reference non-static members from this class or its bases"),
    ("Rule 15-3-4", "R", "Each exception explicitly thrown in the code shall have a handler of a compatible type in all call paths that could lead to that point"),
    ("Rule 15-3-5", "R", "A class type exception shall always be caught by reference"),
    ("Rule 15-3-6", "R", "Where multiple handlers are provided in a single try-catch statement or function-try-block for a derived class and some or all of its bases, the handlers shall be ordered most-derived to base class"),
    ("Rule 15-3-7", "R", "Where multiple handlers are provided in a single try-catch statement or function-try-block, any ellipsis (catch-all) handler shall occur last"),
    ("Rule 15-4-1", "R", "If a function is declared with an exception-specification, then all declarations of the same function (in other translation units) shall be declared with the same set of type-ids"),
    ("Rule 15-5-1", "R", "A class destructor shall not exit with an exception"),
    ("Rule 15-5-2", "R", "Where a function's declaration includes an exception-specification, the function shall only be capable of throwing exceptions of the indicated type(s)"),
    ("Rule 15-5-3", "R", "The terminate() function shall not be called implicitly"),
    ("Rule 16-0-1", "R", "#include directives in a file shall only be preceded by other preprocessor directives or comments"),
    ("Rule 16-0-2", "R", "Macros shall only be #define'd or #undef'd in the global namespace"),
    ("Rule 16-0-3", "R", "#undef shall not be used"),
    ("Rule 16-0-4", "R", "Function-like macros shall not be defined"),
    ("Rule 16-0-5", "R", "Arguments to a function-like macro shall not contain tokens that look like preprocessing directives"),
    ("Rule 16-0-6", "R", "In the definition of a function-like macro, each instance of a parameter shall be enclosed in parentheses, unless it is used as the operand of # or ##"),
    ("Rule 16-0-7", "R", "Undefined macro identifiers shall not be used in #if or #elif preprocessor directives, except as operands to the defined operator"),
    ("Rule 16-0-8", "R", "If the # token appears as the first token on a line, then it shall be immediately followed by a preprocessing token"),
    ("Rule 16-1-1", "R", "The defined preprocessor operator shall only be used in one of the two standard forms"),
    ("Rule 16-1-2", "R", "All #else, #elif and #endif preprocessor directives shall reside in the same file as the #if or #ifdef directive to which they are related"),
    ("Rule 16-2-1", "R", "The pre-processor shall only be used for file inclusion and include guards"),
    ("Rule 16-2-2", "R", "C++ macros shall only be used for include guards, type qualifiers, or storage class specifiers"),
    ("Rule 16-2-3", "R", "Include guards shall be provided"),
    ("Rule 16-2-4", "R", "The ', \", /* or // characters shall not occur in a header file name"),
    ("Rule 16-2-5", "A", "The \\ character should not occur in a header file name"),
    ("Rule 16-2-6", "R", "The #include directive shall be followed by either a <filename> or \"filename\" sequence"),
    ("Rule 16-3-1", "R", "There shall be at most one occurrence of the # or ## operators in a single macro definition"),
    ("Rule 16-3-2", "A", "The # and ## operators should not be used"),
    ("Rule 16-6-1", "D", "All uses of the #pragma directive shall be documented"),
    ("Rule 17-0-1", "R", "Reserved identifiers, macros and functions in the standard library shall not be defined, redefined or undefined"),
    ("Rule 17-0-2", "R", "The names of standard library macros and objects shall not be reused"),
    ("Rule 17-0-3", "R", "The names of standard library functions shall not be overridden"),
    ("Rule 17-0-4", "D", "All library code shall conform to MISRA C++"),
    ("Rule 17-0-5", "R", "The setjmp macro and the longjmp function shall not be used"),
    ("Rule 18-0-1", "R", "The C library shall not be used"),
    ("Rule 18-0-2", "R", "The library functions atof, atoi and atol from library <cstdlib> shall not be used"),
    ("Rule 18-0-3", "R", "The library functions abort, exit, getenv and system from library <cstdlib> shall not be used"),
    ("Rule 18-0-4", "R", "The time handling functions of library <ctime> shall not be used"),
    ("Rule 18-0-5", "R", "The unbounded functions of library <cstring> shall not be used"),
    ("Rule 18-2-1", "R", "The macro offsetof shall not be used"),
    ("Rule 18-4-1", "R", "Dynamic heap memory allocation shall not be used"),
    ("Rule 18-7-1", "R", "The signal handling facilities of <csignal> shall not be used"),
    ("Rule 19-3-1", "R", "The error indicator errno shall not be used"),
    ("Rule 27-0-1", "R", "The stream input/output library <cstdio> shall not be used"),
)


TABLES = {
    "MISRA C:2004": MISRA_C_2004,
    "MISRA C:2012": MISRA_C_2012,
    "MISRA C++:2008": MISRA_CPP_2008,
}
