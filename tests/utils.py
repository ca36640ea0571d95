"""Test utilities for the doxy2md test suite.

This module provides helpers that wrap XML snippets into complete Doxygen
documents, parse them into the order-preserving element shape, and write
a small but complete Doxygen XML output folder to disk.
"""

import shutil
import tempfile
from pathlib import Path

from doxy2md.parsers.xml_access import XmlAccess, XmlElement

DOXYGEN_VERSION = "1.9.8"

_XSI = 'xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"'


def parse_xml(text: str) -> XmlElement:
    """Parse an XML snippet and return its root element."""
    return XmlAccess().parse_string(text)[0]


def doxygen_file(compounddefs_xml: str) -> str:
    """Wrap ``<compounddef>`` elements into a ``<doxygen>`` compound file."""
    return (
        "<?xml version='1.0' encoding='UTF-8' standalone='no'?>\n"
        f'<doxygen {_XSI} xsi:noNamespaceSchemaLocation="compound.xsd" '
        f'version="{DOXYGEN_VERSION}" xml:lang="en-US">\n'
        f"{compounddefs_xml}\n"
        "</doxygen>\n"
    )


def index_file(entries: list[tuple[str, str, str]], members: dict[str, list[tuple[str, str, str]]] = None) -> str:
    """Build an ``index.xml`` listing ``(refid, kind, name)`` compounds.

    ``members`` maps a compound refid to its ``(refid, kind, name)`` members.
    """
    members = members or {}
    lines = [
        "<?xml version='1.0' encoding='UTF-8' standalone='no'?>",
        f'<doxygenindex {_XSI} xsi:noNamespaceSchemaLocation="index.xsd" '
        f'version="{DOXYGEN_VERSION}" xml:lang="en-US">',
    ]
    for refid, kind, name in entries:
        lines.append(f'  <compound refid="{refid}" kind="{kind}"><name>{name}</name>')
        for member_refid, member_kind, member_name in members.get(refid, []):
            lines.append(
                f'    <member refid="{member_refid}" kind="{member_kind}"><name>{member_name}</name></member>'
            )
        lines.append("  </compound>")
    lines.append("</doxygenindex>")
    return "\n".join(lines) + "\n"


def doxyfile(options: dict[str, list[str]]) -> str:
    """Build a ``Doxyfile.xml`` with string options."""
    lines = [
        "<?xml version='1.0' encoding='UTF-8' standalone='no'?>",
        f'<doxyfile {_XSI} xsi:noNamespaceSchemaLocation="doxyfile.xsd" '
        f'version="{DOXYGEN_VERSION}" xml:lang="en-US">',
    ]
    for option_id, values in options.items():
        lines.append(f'  <option id="{option_id}" default="no" type="string">')
        lines.extend(f"    <value><![CDATA[{value}]]></value>" for value in values)
        lines.append("  </option>")
    lines.append("</doxyfile>")
    return "\n".join(lines) + "\n"


# ----------------------------------------------------------------------------
# Sample project: namespace ns, class ns::Foo, file include/foo.h
# ----------------------------------------------------------------------------

HELPER_ID = "namespacens_1a0f1e2d"
FOO_ID = "classns_1_1_foo"
FILE_ID = "foo_8h"
DIR_ID = "dir_d44c64559bbebec7f509842c48db8b23"
GROUP_ID = "group__core"
PAGE_ID = "indexpage"

NAMESPACE_XML = f"""
  <compounddef id="namespacens" kind="namespace" language="C++">
    <compoundname>ns</compoundname>
    <innerclass refid="{FOO_ID}" prot="public">ns::Foo</innerclass>
    <sectiondef kind="func">
      <memberdef kind="function" id="{HELPER_ID}" prot="public" static="no" const="no" explicit="no" inline="no" virt="non-virtual">
        <type>int</type>
        <definition>int ns::helper</definition>
        <argsstring>(int value)</argsstring>
        <name>helper</name>
        <qualifiedname>ns::helper</qualifiedname>
        <param>
          <type>int</type>
          <declname>value</declname>
        </param>
        <briefdescription>
<para>Double a value. </para>
        </briefdescription>
        <detaileddescription>
        </detaileddescription>
        <inbodydescription>
        </inbodydescription>
        <location file="include/foo.h" line="20" column="5" declfile="include/foo.h" declline="20" declcolumn="5"/>
      </memberdef>
    </sectiondef>
    <briefdescription>
<para>The sample namespace. </para>
    </briefdescription>
    <detaileddescription>
    </detaileddescription>
    <location file="include/foo.h" line="3" column="1"/>
  </compounddef>
"""

CLASS_XML = f"""
  <compounddef id="{FOO_ID}" kind="class" language="C++" prot="public">
    <compoundname>ns::Foo</compoundname>
    <includes refid="{FILE_ID}" local="no">foo.h</includes>
    <sectiondef kind="public-func">
      <memberdef kind="function" id="{FOO_ID}_1a01" prot="public" static="no" const="no" explicit="no" inline="no" virt="non-virtual">
        <type></type>
        <definition>ns::Foo::Foo</definition>
        <argsstring>()</argsstring>
        <name>Foo</name>
        <qualifiedname>ns::Foo::Foo</qualifiedname>
        <briefdescription>
<para>Build a Foo. </para>
        </briefdescription>
        <detaileddescription>
        </detaileddescription>
        <inbodydescription>
        </inbodydescription>
        <location file="include/foo.h" line="9" column="3"/>
      </memberdef>
      <memberdef kind="function" id="{FOO_ID}_1a02" prot="public" static="no" const="yes" explicit="no" inline="no" virt="non-virtual">
        <type>bool</type>
        <definition>bool ns::Foo::operator==</definition>
        <argsstring>(const Foo &amp;other) const</argsstring>
        <name>operator==</name>
        <qualifiedname>ns::Foo::operator==</qualifiedname>
        <param>
          <type>const <ref refid="{FOO_ID}" kindref="compound">Foo</ref> &amp;</type>
          <declname>other</declname>
        </param>
        <briefdescription>
        </briefdescription>
        <detaileddescription>
        </detaileddescription>
        <inbodydescription>
        </inbodydescription>
        <location file="include/foo.h" line="10" column="8"/>
      </memberdef>
      <memberdef kind="function" id="{FOO_ID}_1a03" prot="public" static="no" const="yes" explicit="no" inline="yes" virt="non-virtual">
        <type>int</type>
        <definition>int ns::Foo::bar</definition>
        <argsstring>(int x) const</argsstring>
        <name>bar</name>
        <qualifiedname>ns::Foo::bar</qualifiedname>
        <param>
          <type>int</type>
          <declname>x</declname>
        </param>
        <briefdescription>
<para>Compute bar. </para>
        </briefdescription>
        <detaileddescription>
<para>Calls <ref refid="{HELPER_ID}" kindref="member">helper</ref> and <ref refid="classmissing" kindref="compound">Missing</ref>.</para>
<para><parameterlist kind="param"><parameteritem>
<parameternamelist>
<parametername direction="in">x</parametername>
</parameternamelist>
<parameterdescription>
<para>The input. </para>
</parameterdescription>
</parameteritem>
</parameterlist>
<simplesect kind="return"><para>Twice <computeroutput>x</computeroutput>. </para>
</simplesect>
</para>
        </detaileddescription>
        <inbodydescription>
        </inbodydescription>
        <location file="include/foo.h" line="12" column="7" bodyfile="include/foo.h" bodystart="12" bodyend="14"/>
        <references refid="{HELPER_ID}" compoundref="{FILE_ID}" startline="20" endline="22">ns::helper</references>
      </memberdef>
    </sectiondef>
    <sectiondef kind="public-attrib">
      <memberdef kind="variable" id="{FOO_ID}_1a04" prot="public" static="no" mutable="no">
        <type>int</type>
        <definition>int ns::Foo::count_</definition>
        <argsstring></argsstring>
        <name>count_</name>
        <qualifiedname>ns::Foo::count_</qualifiedname>
        <initializer>= 0</initializer>
        <briefdescription>
        </briefdescription>
        <detaileddescription>
        </detaileddescription>
        <inbodydescription>
        </inbodydescription>
        <location file="include/foo.h" line="16" column="7"/>
      </memberdef>
    </sectiondef>
    <briefdescription>
<para>A <bold>small</bold> class. </para>
    </briefdescription>
    <detaileddescription>
<para>Foo keeps a count.</para>
<para><simplesect kind="note"><para>Not thread safe. </para>
</simplesect>
</para>
    </detaileddescription>
    <location file="include/foo.h" line="7" column="1" bodyfile="include/foo.h" bodystart="7" bodyend="17"/>
    <listofallmembers>
      <member refid="{FOO_ID}_1a03" prot="public" virt="non-virtual"><scope>ns::Foo</scope><name>bar</name></member>
      <member refid="{FOO_ID}_1a04" prot="public" virt="non-virtual"><scope>ns::Foo</scope><name>count_</name></member>
      <member refid="{FOO_ID}_1a01" prot="public" virt="non-virtual"><scope>ns::Foo</scope><name>Foo</name></member>
      <member refid="{FOO_ID}_1a02" prot="public" virt="non-virtual"><scope>ns::Foo</scope><name>operator==</name></member>
    </listofallmembers>
  </compounddef>
"""

FILE_XML = f"""
  <compounddef id="{FILE_ID}" kind="file" language="C++">
    <compoundname>foo.h</compoundname>
    <innerclass refid="{FOO_ID}" prot="public">ns::Foo</innerclass>
    <innernamespace refid="namespacens">ns</innernamespace>
    <briefdescription>
<para>Foo declarations. </para>
    </briefdescription>
    <detaileddescription>
    </detaileddescription>
    <programlisting>
<codeline lineno="12" refid="{FOO_ID}_1a03" refkind="member"><highlight class="normal"><sp/><sp/>int<sp/>bar(int<sp/>x)<sp/>const<sp/>{{</highlight></codeline>
<codeline lineno="13"><highlight class="keywordflow">return</highlight><highlight class="normal"><sp/><ref refid="{HELPER_ID}" kindref="member">helper</ref>(x);</highlight></codeline>
<codeline lineno="14"><highlight class="normal"><sp/><sp/>}}</highlight></codeline>
    </programlisting>
    <location file="include/foo.h"/>
  </compounddef>
"""

DIR_XML = f"""
  <compounddef id="{DIR_ID}" kind="dir">
    <compoundname>include</compoundname>
    <innerfile refid="{FILE_ID}">foo.h</innerfile>
    <briefdescription>
    </briefdescription>
    <detaileddescription>
    </detaileddescription>
    <location file="include/"/>
  </compounddef>
"""

GROUP_XML = f"""
  <compounddef id="{GROUP_ID}" kind="group">
    <compoundname>core</compoundname>
    <title>Core API</title>
    <innerclass refid="{FOO_ID}" prot="public">ns::Foo</innerclass>
    <sectiondef kind="func">
      <member refid="{HELPER_ID}"><name>helper</name></member>
    </sectiondef>
    <briefdescription>
<para>The core of the sample. </para>
    </briefdescription>
    <detaileddescription>
    </detaileddescription>
  </compounddef>
"""

PAGE_XML = f"""
  <compounddef id="{PAGE_ID}" kind="page">
    <compoundname>index</compoundname>
    <title>Sample Project</title>
    <briefdescription>
    </briefdescription>
    <detaileddescription>
<para>Start with <ref refid="{FOO_ID}" kindref="compound">ns::Foo</ref>, see <ulink url="https://example.com">the site</ulink>.</para>
<sect1 id="{PAGE_ID}_1install">
<title>Install</title>
<para>Copy <computeroutput>foo.h</computeroutput> &amp; build.</para>
</sect1>
    </detaileddescription>
    <location file="docs/index.md"/>
  </compounddef>
"""

SAMPLE_INDEX_ENTRIES = [
    (FOO_ID, "class", "ns::Foo"),
    ("namespacens", "namespace", "ns"),
    (FILE_ID, "file", "foo.h"),
    (GROUP_ID, "group", "core"),
    (PAGE_ID, "page", "index"),
    (DIR_ID, "dir", "include"),
]

SAMPLE_INDEX_MEMBERS = {
    FOO_ID: [
        (f"{FOO_ID}_1a01", "function", "Foo"),
        (f"{FOO_ID}_1a02", "function", "operator=="),
        (f"{FOO_ID}_1a03", "function", "bar"),
        (f"{FOO_ID}_1a04", "variable", "count_"),
    ],
    "namespacens": [(HELPER_ID, "function", "helper")],
}

SAMPLE_COMPOUNDS = {
    FOO_ID: CLASS_XML,
    "namespacens": NAMESPACE_XML,
    FILE_ID: FILE_XML,
    GROUP_ID: GROUP_XML,
    PAGE_ID: PAGE_XML,
    DIR_ID: DIR_XML,
}


def write_sample_xml_folder(folder: Path) -> Path:
    """Write the sample project as a Doxygen XML output folder."""
    folder.mkdir(parents=True, exist_ok=True)
    (folder / "index.xml").write_text(index_file(SAMPLE_INDEX_ENTRIES, SAMPLE_INDEX_MEMBERS), encoding="utf-8")
    for refid, compounddef in SAMPLE_COMPOUNDS.items():
        (folder / f"{refid}.xml").write_text(doxygen_file(compounddef), encoding="utf-8")
    (folder / "Doxyfile.xml").write_text(doxyfile({"PROJECT_NAME": ["Sample"]}), encoding="utf-8")
    return folder


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    if temp_dir.exists():
        shutil.rmtree(temp_dir)
