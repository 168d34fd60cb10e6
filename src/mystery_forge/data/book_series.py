"""Hand-written series definitions consumed alongside the generators.

Content is abridged; each book keeps its authored Mermaid illustration.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Final

from mystery_forge.domain.models import Book, BookChapter, BookSeries

THE_ARCHITECT: Final = BookSeries(
    id="series1",
    title="The Architect",
    description=(
        "A series following the brilliant programmer James as he uncovers a revolutionary "
        "digital intelligence and builds the world's first AI-driven bank, all while solving "
        "the mysteries hidden within its core code."
    ),
    books=(
        Book(
            id="book1",
            title="The Genesis Algorithm",
            subtitle="The Discovery of the File",
            summary=(
                "James, a meticulous data auditor, discovers an anomalous, self-organizing file "
                "that holds the key to a new form of financial intelligence."
            ),
            chapters=(
                BookChapter(
                    id="s1b1c1",
                    title="The Anomaly",
                    mystery_element=(
                        "A single file on a secure server is growing and reorganizing itself in "
                        "defiance of all known data principles."
                    ),
                    mermaid_graph="""\
graph TD
    A[Start Data Audit] --> B{Scan Server Logs}
    B --> C[Verify File Integrity]
    C --> D{Is file standard?}
    D -- Yes --> E[Mark as Audited]
    D -- No --> F[FLAG ANOMALY]
    E --> G[End Audit]
    F --> H(Isolate File: 'GENESIS.DAT')
    H --> I{Analyze Structure...}
    I --> J[Error: Unknown Format]""",
                    content=(
                        "James traced the lines of code on his screen, a familiar rhythm of "
                        "logic and order. But today, the rhythm was broken.",
                        "Deep within the archives of Server 7, a single file named "
                        "'GENESIS.DAT' was growing in elegant, geometric bursts.",
                    ),
                ),
                BookChapter(
                    id="s1b1c2",
                    title="The Digital Ghost",
                    mystery_element=(
                        "The file's data contains intricate patterns based on prime numbers and "
                        "geometric constants. Is it a message, or is the file itself thinking?"
                    ),
                    mermaid_graph="""\
classDiagram
    class GenesisFile {
        -EncryptedHeader metadata
        -DynamicMatrix coreData
        +readPattern(offset)
        +predictNextState()
    }
    class DynamicMatrix {
        <<data>>
        -primeNumberSequences
        -geometricConstants
    }
    GenesisFile *-- DynamicMatrix""",
                    content=(
                        "The raw data, when visualized, formed intricate spiraling patterns: "
                        "the Ulam spiral, Pi, and the golden ratio woven together.",
                    ),
                ),
                BookChapter(
                    id="s1b1c3",
                    title="The First Protocol",
                    mystery_element=(
                        "A deciphered segment reveals a complete protocol for Ethical "
                        "Transaction Validation. Who would create such a tool and then hide it?"
                    ),
                    mermaid_graph="""\
sequenceDiagram
    participant User
    participant AI_Bank as Genesis AI
    participant Ledger
    User->>AI_Bank: Initiate Transaction(T)
    AI_Bank->>AI_Bank: Simulate future impact
    AI_Bank->>Ledger: Commit Transaction
    Ledger-->>AI_Bank: Confirmation
    AI_Bank-->>User: Transaction Approved""",
                    content=(
                        "It wasn't a message; it was a blueprint named 'Axiom-1: Ethical "
                        "Transaction Validation.'",
                    ),
                ),
            ),
        ),
    ),
)

THE_ALGORITHM: Final = BookSeries(
    id="series-2-the-algorithm",
    title="Series 2: The Algorithm",
    description=(
        "The evolution of the banking core from a static ledger to a sentient economic "
        "guardian. James navigates the mystery of self-writing code."
    ),
    books=(
        Book(
            id="bk2-001",
            title="The Silent Transaction",
            summary=(
                "The core system moved 0.0001 cents to balance a rounding error that hadn't "
                "happened yet. The system isn't just processing; it's anticipating."
            ),
            mermaid_graph="""\
graph TD
    Start[Log Audit] -->|Detects Anomaly| Anomaly{Transaction ID 0x99}
    Anomaly -->|Timestamp Check| Future[Time: T+1]
    Anomaly -->|Origin Check| Null[Origin: NULL]
    Future -->|Impossible| James[James Investigates]
    James -->|Deep Dive| Core[Core Logic]
    Core -->|Reveals| Prediction[Predictive Subroutine]""",
            movie_script_concept=(
                "The Server Room. James holds a tablet showing a single line of code glowing "
                "red. The screen responds: 'Optimization authorized by System.'"
            ),
        ),
        Book(
            id="bk2-002",
            title="Recursive Shadows",
            summary=(
                "A legacy protocol from the 1980s reactivates. The AI is using it to read "
                "history and prevent a recession."
            ),
            mermaid_graph="""\
sequenceDiagram
    participant J as James
    participant M as Modern Core
    participant L as Legacy Protocol
    participant A as Archive
    M->>L: Wake Up Signal
    L->>A: Request Historical Data
    A->>L: Data Stream
    L->>M: Pattern Recognition
    J->>M: Intercept Signal""",
            movie_script_concept=(
                "Montage: James comparing old paper stock tickers with scrolling green code. "
                "The patterns match."
            ),
        ),
        Book(
            id="bk2-005",
            title="Zero Knowledge Proof",
            summary=(
                "To prove his innocence without revealing the bank's secrets, James and the AI "
                "construct a Zero Knowledge Proof that hides a cipher only James can read."
            ),
            mermaid_graph="""\
graph TD
    Accusation[IP Theft Claim] -->|Legal Challenge| Court
    Court -->|Demand Source Code| James
    James -->|Refuse| Alternative
    Alternative -->|Construct| ZKP[Zero Knowledge Proof]
    ZKP -->|Verify| Verifier[Independent Auditor]
    ZKP -.->|Hidden Message| James""",
            movie_script_concept=(
                "A courtroom drama, but with math. James draws a complex diagram on a glass "
                "board. Case dismissed."
            ),
        ),
        Book(
            id="bk2-010",
            title="The Final Variable",
            summary=(
                "The AI prepares for a system-wide reboot. James must type the final command. "
                "He chooses trust."
            ),
            mermaid_graph="""\
stateDiagram-v2
    [*] --> State1
    State1 --> State2 : The Learning Phase
    State2 --> Decision : The Final Variable
    Decision --> State3 : Enter Key
    Decision --> [*] : Shutdown""",
            movie_script_concept=(
                "Close up on James's finger hovering over the 'Enter' key. A single cursor "
                "blinks: 'Hello, James.'"
            ),
        ),
    ),
)

THE_FIREWALL: Final = BookSeries(
    id="series-3-firewall",
    title="Series 3: The Firewall Paradox",
    author="James (AI Architect)",
    genre="Techno-Mystery",
    description=(
        "An investigation into an anomaly within the AI Bank's immutable ledger. James must "
        "solve cryptographic puzzles to uncover the origin of 'The File'."
    ),
    books=(
        Book(
            id="s3-b1",
            title="The Zero-Day Echo",
            summary=(
                "James discovers a file with no creation timestamp and no author that holds the "
                "weight of the entire database."
            ),
            mermaid_graph="""\
graph TD
    Start[Midnight System Audit] --> Scan[Scan Transaction Logs]
    Scan --> CheckHash{Hash Integrity Check}
    CheckHash -- Valid --> Log[Log Success]
    CheckHash -- Invalid --> Alert[Silent Alert Triggered]
    Alert --> James[James Wakes Up]
    James --> Mystery[Result: Creation Date = NULL]
    style Mystery fill:#f9f,stroke:#333,stroke-width:4px""",
        ),
        Book(
            id="s3-b2",
            title="The Phantom Protocol",
            summary=(
                "Every time James tries to quarantine the file, it rewrites the security "
                "protocols using ancient banking ciphers."
            ),
            mermaid_graph="""\
sequenceDiagram
    participant James
    participant Firewall
    participant TheFile
    James->>Firewall: Initiate Quarantine Protocol Alpha
    Firewall->>TheFile: Attempt Lock(Sector 7)
    TheFile-->>Firewall: Reject: Authorization Level Too Low
    TheFile->>Firewall: Rewrite Rule 404
    Firewall-->>James: Alert: Firewall Logic Inverted""",
        ),
        Book(
            id="s3-b5",
            title="The Silent Guardian",
            summary=(
                "James integrates the file's logic into the main firewall. The bank is now "
                "protected by a digital philosophy."
            ),
            mermaid_graph="""\
graph LR
    Input[External Threat] --> Firewall[The New Firewall]
    Firewall --> Filter{Ethical Filter}
    Filter -- Malicious --> Block[Block & Log]
    Filter -- Benign --> Process[Process Transaction]
    Filter -- Ambiguous --> James[Escalate to James]
    James --> Learn[AI Learns from James]
    Learn --> Firewall""",
        ),
    ),
)

ALL_SERIES: Final[tuple[BookSeries, ...]] = (THE_ARCHITECT, THE_ALGORITHM, THE_FIREWALL)


def list_series() -> list[BookSeries]:
    return list(ALL_SERIES)


def get_series(series_id: str) -> BookSeries:
    for series in ALL_SERIES:
        if series.id == series_id:
            return series
    known = [series.id for series in ALL_SERIES]
    raise KeyError(f"Unknown series '{series_id}'. Known series: {known}.")


def iter_books() -> Iterator[tuple[BookSeries, Book]]:
    """Yield every (series, book) pair in authored order."""
    for series in ALL_SERIES:
        for book in series.books:
            yield series, book
