"""Inline HTML for the single-page tracker UI."""

PAGE_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Nutrition Tracker</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem;
             background: #f3f4f6; }
      .card { background: #fff; padding: 1.5rem; border-radius: 0.75rem;
              max-width: 28rem; margin: 0 auto 1.5rem; }
      .card input { display: block; width: 100%; padding: 0.4rem 0.6rem;
                    margin-bottom: 0.75rem; box-sizing: border-box; }
      .wide { max-width: 64rem; margin: 2rem auto; }
      table { width: 100%; border-collapse: collapse; margin-bottom: 1.5rem; }
      th, td { border: 1px solid #d1d5db; padding: 0.5rem; text-align: left; }
      th { background: #e5e7eb; }
      .bar { position: relative; height: 2rem; background: #fff;
             border: 1px solid #d1d5db; display: flex; }
      .segment { height: 100%; }
      .reference { position: absolute; top: -0.25rem; bottom: -0.25rem;
                   border-left: 2px dashed; }
      .legend span { display: inline-block; margin-right: 1rem; }
      .swatch { display: inline-block; width: 0.8rem; height: 0.8rem;
                margin-right: 0.3rem; }
      .hidden { display: none; }
    </style>
  </head>
  <body>
    <h1 style="text-align: center">Nutrition Tracker</h1>

    <div class="card">
      <h2>Daily Requirement</h2>
      <input type="number" name="calorieReq" placeholder="Calorie Requirement" />
      <input type="number" name="proteinReq" placeholder="Protein Requirement" />
    </div>

    <form id="entry-form" class="card">
      <input type="text" name="name" placeholder="Food Name" />
      <input type="number" step="any" name="amount" placeholder="Amount (gms)" />
      <input type="number" step="any" name="caloriesPerGm"
             placeholder="Calories per gm" />
      <input type="number" step="any" name="proteinsPerGm"
             placeholder="Proteins per gm" />
      <button type="submit" id="submit-button">Add Entry</button>
      <button type="button" id="reset-button">Reset</button>
    </form>

    <div id="food-list" class="wide hidden">
      <h2>Food List <button id="clear-button">Clear All</button></h2>
      <table>
        <thead>
          <tr><th>Food</th><th>Calories</th><th>Proteins</th><th>Actions</th></tr>
        </thead>
        <tbody id="rows"></tbody>
      </table>
      <div id="charts"></div>
    </div>

    <script>
      const inputs = document.querySelectorAll('input[name]');

      async function send(method, path, body) {
        const options = { method, headers: {} };
        if (body !== undefined) {
          options.headers['Content-Type'] = 'application/json';
          options.body = JSON.stringify(body);
        }
        const res = await fetch(path, options);
        if (!res.ok) {
          console.error('Request failed', path, res.status);
          return null;
        }
        return res.json();
      }

      // Requests run one at a time, in the order the user made them.
      let pending = Promise.resolve();

      function call(method, path, body) {
        pending = pending.catch(() => null).then(() => send(method, path, body));
        return pending;
      }

      const ESCAPES = {
        '&': '&amp;', '<': '&lt;', '>': '&gt;', '"': '&quot;', "'": '&#39;'
      };

      function text(value) {
        return String(value).replace(/[&<>"']/g, (c) => ESCAPES[c]);
      }

      function renderFields(view) {
        inputs.forEach((input) => { input.value = view.fields[input.name]; });
      }

      function renderChart(chart) {
        const segments = chart.segments.map((s) =>
          `<div class="segment" title="${text(s.name)}: ${s.value}"
                style="width:${s.width_percent}%;background:${s.color}"></div>`
        ).join('');
        const legend = chart.segments.map((s) =>
          `<span><i class="swatch" style="background:${s.color}"></i>${text(s.name)}</span>`
        ).join('');
        return `<h3 style="text-align:center">${chart.title}</h3>
          <div class="bar" aria-label="${chart.axis_label}">${segments}
            <div class="reference" title="${chart.reference_label}: ${chart.requirement}"
                 style="left:${chart.reference_percent}%;border-color:${chart.reference_color}">
            </div>
          </div>
          <div>0 &ndash; ${chart.upper_bound}</div>
          <div class="legend">${legend}</div>`;
      }

      function render(view, withFields) {
        if (!view) return;
        if (withFields) renderFields(view);
        document.getElementById('submit-button').textContent = view.submit_label;
        document.getElementById('food-list').classList.toggle('hidden', !view.show_list);
        document.getElementById('rows').innerHTML = view.rows.map((row) =>
          `<tr><td>${text(row.name)}</td><td>${row.total_calories}</td>
           <td>${row.total_proteins}</td>
           <td><button data-edit="${row.index}">Edit</button></td></tr>`
        ).join('');
        document.getElementById('charts').innerHTML = view.charts.map(renderChart).join('');
      }

      inputs.forEach((input) => {
        input.addEventListener('input', async () => {
          render(await call('POST', '/api/fields', { field: input.name, value: input.value }), false);
        });
      });
      document.getElementById('entry-form').addEventListener('submit', async (event) => {
        event.preventDefault();
        render(await call('POST', '/api/entries'), true);
      });
      document.getElementById('reset-button').addEventListener('click', async () => {
        render(await call('POST', '/api/form/reset'), true);
      });
      document.getElementById('clear-button').addEventListener('click', async () => {
        render(await call('DELETE', '/api/entries'), true);
      });
      document.getElementById('rows').addEventListener('click', async (event) => {
        const index = event.target.dataset.edit;
        if (index === undefined) return;
        render(await call('POST', `/api/entries/${index}/edit`), true);
      });

      call('GET', '/api/state').then((view) => render(view, true));
    </script>
  </body>
</html>
"""
