from stylecheck.identifiers import Scope, SourcePosition
from stylecheck.tokenizer import lex, tokenize


def declared(source):
    return [(identifier.name, identifier.scope) for identifier in tokenize(source)]


def find(source, name):
    matches = [identifier for identifier in tokenize(source) if identifier.name == name]
    assert len(matches) == 1, matches
    return matches[0]


def test_lex_drops_comments_strings_and_directives():
    source = """
#region Fields
// private int hidden;
/* private int alsoHidden; */
var text = "private int inString;";
var raw = \"\"\"private int inRaw;\"\"\";
var verbatim = @"C:\\path\\""quoted"" end";
var interpolated = $"{value["key"]} done";
var letter = '"';
#endregion
"""
    words = [token.text for token in lex(source) if token.kind == "word"]

    assert "hidden" not in words
    assert "alsoHidden" not in words
    assert "inString" not in words
    assert "inRaw" not in words
    assert "region" not in words
    assert "quoted" not in words
    assert words.count("var") == 5


def test_lex_positions_are_one_based():
    tokens = lex("class A\n{\n    int b;\n}")

    b = [token for token in tokens if token.text == "b"][0]
    assert (b.line, b.column) == (3, 9)


def test_private_field_scope():
    assert declared("private IWorkerQueue _workerQueue;") == [("_workerQueue", Scope.PRIVATE_FIELD)]
    assert declared("internal int _count;") == [("_count", Scope.PRIVATE_FIELD)]


def test_static_and_thread_static_fields():
    source = """
class Pool
{
    private static readonly object s_gate = new object();
    internal static int s_total;
    [ThreadStatic]
    private static int t_depth;
    public static int Shared;
}
"""
    result = declared(source)

    assert ("s_gate", Scope.STATIC_FIELD) in result
    assert ("s_total", Scope.STATIC_FIELD) in result
    assert ("t_depth", Scope.THREAD_STATIC_FIELD) in result
    assert ("Shared", Scope.PUBLIC_MEMBER) in result


def test_type_references_are_not_reported():
    names = [name for name, _ in declared("class Holder { private IWorkerQueue _queue; }")]

    assert names == ["Holder", "_queue"]


def test_interface_and_type_names():
    source = """
public interface IWorkerQueue { }
public class WorkerService { }
internal struct Point { }
public enum Color { Red, Green = 2 }
public record Person(string FirstName, string LastName);
public delegate void WorkHandler(object sender, int attempt);
"""
    result = declared(source)

    assert ("IWorkerQueue", Scope.INTERFACE_NAME) in result
    assert ("WorkerService", Scope.TYPE_NAME) in result
    assert ("Point", Scope.TYPE_NAME) in result
    assert ("Color", Scope.TYPE_NAME) in result
    assert ("Red", Scope.PUBLIC_MEMBER) in result
    assert ("Green", Scope.PUBLIC_MEMBER) in result
    assert ("Person", Scope.TYPE_NAME) in result
    assert ("WorkHandler", Scope.TYPE_NAME) in result
    assert ("sender", Scope.PARAMETER) in result
    assert ("attempt", Scope.PARAMETER) in result
    # positional record parameters become properties and are left alone
    assert "FirstName" not in [name for name, _ in result]


def test_members_and_parameters():
    source = """
public class WorkerService
{
    public WorkerService(IWorkerQueue workerQueue, int retryCount = 3) { }
    public int Count { get; private set; }
    public List<string> Names { get; } = new();
    public event EventHandler Changed;
    private const int MaxRetries = 3;
    protected Task<int> RunAsync<T>(CancellationToken cancellationToken) where T : class => Task.FromResult(1);
    public string this[int index] => Names[index];
}
"""
    result = declared(source)

    assert ("workerQueue", Scope.PARAMETER) in result
    assert ("retryCount", Scope.PARAMETER) in result
    assert ("Count", Scope.PUBLIC_MEMBER) in result
    assert ("Names", Scope.PUBLIC_MEMBER) in result
    assert ("Changed", Scope.PUBLIC_MEMBER) in result
    assert ("MaxRetries", Scope.PUBLIC_MEMBER) in result
    assert ("RunAsync", Scope.PUBLIC_MEMBER) in result
    assert ("cancellationToken", Scope.PARAMETER) in result
    assert ("index", Scope.PARAMETER) in result


def test_interface_members_are_public():
    result = declared("interface IQueue { int Count { get; } void Enqueue(string item); }")

    assert ("Count", Scope.PUBLIC_MEMBER) in result
    assert ("Enqueue", Scope.PUBLIC_MEMBER) in result
    assert ("item", Scope.PARAMETER) in result


def test_members_without_access_modifier_are_unknown():
    result = declared("class Counter { int _count; void Tick(int step) { } }")

    assert ("_count", Scope.UNKNOWN) in result
    assert ("Tick", Scope.UNKNOWN) in result
    assert ("step", Scope.PARAMETER) in result


def test_mixed_access_field_is_unknown():
    assert declared("class A { private protected int value; }")[1] == ("value", Scope.UNKNOWN)


def test_locals_and_loop_variables():
    source = """
class Runner
{
    public void Run(string laugh)
    {
        var total = 0;
        int first = 1, second = 2;
        for (var index = 0; index < 3; index++) { }
        foreach (var ch in laugh) { }
        foreach (char letter in laugh) { }
        using (var reader = Open()) { }
        using var stream = Open();
        try { } catch (InvalidOperationException error) { }
        total = first + second;
    }
}
"""
    result = declared(source)

    assert ("total", Scope.LOCAL_VARIABLE) in result
    assert ("first", Scope.LOCAL_VARIABLE) in result
    assert ("second", Scope.LOCAL_VARIABLE) in result
    assert ("index", Scope.LOOP_VARIABLE) in result
    assert ("ch", Scope.LOOP_VARIABLE) in result
    assert ("letter", Scope.LOOP_VARIABLE) in result
    assert ("reader", Scope.LOCAL_VARIABLE) in result
    assert ("stream", Scope.LOCAL_VARIABLE) in result
    assert ("error", Scope.LOCAL_VARIABLE) in result
    assert [name for name, _ in result].count("total") == 1


def test_foreach_implicit_typing_is_recorded():
    implicit = find("foreach (var ch in laugh) { }", "ch")
    explicit = find("foreach (char ch in laugh) { }", "ch")
    counter = find("for (var i = 0; i < 3; i++) { }", "i")

    assert implicit.construct == "foreach"
    assert implicit.implicitly_typed
    assert implicit.declared_type == "var"
    assert explicit.construct == "foreach"
    assert not explicit.implicitly_typed
    assert counter.construct == "for"
    assert counter.implicitly_typed


def test_statements_are_not_declarations():
    source = """
class A
{
    public void M()
    {
        Console.WriteLine(value);
        value = other;
        items[0] = 1;
        if (ready && count < limit) { }
        return new Widget { Size = 3 };
    }
}
"""
    names = [name for name, _ in declared(source)]

    assert names == ["A", "M"]


def test_deconstruction_is_skipped():
    names = [name for name, _ in declared("var (left, right) = pair; foreach (var (key, value) in map) { }")]

    assert names == []


def test_verbatim_identifier_drops_at_sign():
    assert find("public void Run(string @class) { }", "class").scope == Scope.PARAMETER


def test_positions_and_order():
    source = "public class Widget\n{\n    private int _size;\n}\n"
    identifiers = tokenize(source)

    assert [identifier.position for identifier in identifiers] == [
        SourcePosition(1, 14),
        SourcePosition(3, 17),
    ]


def test_malformed_input_does_not_raise():
    assert isinstance(tokenize("public class { private int ; foreach ( var in ) }}}"), list)
    assert tokenize("") == []


def test_deeply_nested_blocks_are_scanned():
    source = "class A { public void M() " + "{" * 3000 + "int Total = 1;" + "}" * 3000 + " private int count; }"

    result = declared(source)

    assert ("Total", Scope.LOCAL_VARIABLE) in result
    assert ("count", Scope.PRIVATE_FIELD) in result
