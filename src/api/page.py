"""Browser page served at the site root."""

INDEX_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>rush</title>
  <style>
    body { font-family: ui-monospace, monospace; background: #111; color: #ddd; margin: 2rem; }
    h1 { color: #e55; }
    table { border-collapse: collapse; width: 100%; }
    td, th { padding: 0.2rem 0.6rem; text-align: left; border-bottom: 1px solid #333; }
    .add { color: #5c5; }
    .del { color: #e55; }
  </style>
</head>
<body>
  <h1>rush</h1>
  <p id="summary">Loading commits...</p>
  <table>
    <thead>
      <tr><th>Date</th><th>Author</th><th>Message</th><th>Files</th><th>+</th><th>-</th></tr>
    </thead>
    <tbody id="commits"></tbody>
  </table>
  <script>
    fetch("/commits-data.json")
      .then((response) => response.json())
      .then((data) => {
        const meta = data.metadata;
        document.getElementById("summary").textContent =
          `${meta.totalCommits} commits by ${meta.authors.length} authors, ` +
          `${meta.firstCommitDate} to ${meta.lastCommitDate}`;
        const body = document.getElementById("commits");
        for (const commit of data.commits) {
          const row = document.createElement("tr");
          for (const [value, cls] of [
            [commit.date, ""],
            [commit.author, ""],
            [commit.message, ""],
            [commit.filesChanged, ""],
            [commit.insertions, "add"],
            [commit.deletions, "del"],
          ]) {
            const cell = document.createElement("td");
            cell.textContent = value;
            if (cls) cell.className = cls;
            row.appendChild(cell);
          }
          body.appendChild(row);
        }
      })
      .catch(() => {
        document.getElementById("summary").textContent = "Commit data not available";
      });
  </script>
</body>
</html>
"""
