INDEX_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Web Service Monitor</title>
    <style>
        body {
            font-family: Arial, sans-serif;
            max-width: 800px;
            margin: 0 auto;
            padding: 20px;
            background-color: #f5f5f5;
        }
        .container {
            background: white;
            padding: 20px;
            border-radius: 8px;
            box-shadow: 0 2px 4px rgba(0,0,0,0.1);
        }
        h1 { color: #333; text-align: center; }
        .service-list { margin: 20px 0; }
        .service-item {
            display: flex;
            align-items: center;
            padding: 10px;
            margin: 5px 0;
            background: #f9f9f9;
            border-radius: 4px;
            border-left: 4px solid #ddd;
        }
        .service-item.offline { animation: blink-red 2s infinite; }
        @keyframes blink-red {
            0%, 50% { background-color: #f9f9f9; }
            25%, 75% { background-color: #f44336; }
        }
        .service-info { flex: 1; display: flex; align-items: center; }
        .delete-btn {
            background: #dc3545;
            color: white;
            border: none;
            border-radius: 50%;
            width: 24px;
            height: 24px;
            padding: 0;
            cursor: pointer;
            font-size: 14px;
            margin-left: 10px;
        }
        .delete-btn:hover { background: #c82333; }
        .status-light {
            width: 12px;
            height: 12px;
            border-radius: 50%;
            margin-right: 10px;
        }
        .status-online { background-color: #4CAF50; box-shadow: 0 0 6px #4CAF50; }
        .status-offline { background-color: #f44336; box-shadow: 0 0 6px #f44336; }
        .service-name { font-weight: bold; margin-right: 10px; }
        .add-form {
            margin-top: 30px;
            padding: 20px;
            background: #f0f0f0;
            border-radius: 4px;
        }
        .form-group { margin: 10px 0; }
        label { display: block; margin-bottom: 5px; font-weight: bold; }
        input[type="text"], input[type="url"] {
            width: 100%;
            padding: 8px;
            border: 1px solid #ddd;
            border-radius: 4px;
            box-sizing: border-box;
        }
        button {
            background: #007cba;
            color: white;
            padding: 10px 20px;
            border: none;
            border-radius: 4px;
            cursor: pointer;
        }
        button:hover { background: #005a87; }
        .refresh-controls {
            display: flex;
            justify-content: space-between;
            align-items: center;
            margin-bottom: 10px;
        }
        .refresh-btn { background: #28a745; }
        .refresh-btn:hover { background: #218838; }
        .countdown { font-size: 0.9em; color: #666; }
    </style>
</head>
<body>
    <div class="container">
        <h1>Web Service Monitor</h1>

        <div class="refresh-controls">
            <div class="countdown">
                Next refresh in: <span id="countdown">10</span> s
            </div>
            <button class="refresh-btn" onclick="manualRefresh()">Refresh now</button>
        </div>

        <div class="service-list" id="serviceList">
            <p>Loading services...</p>
        </div>

        <div class="add-form">
            <h3>Add a service</h3>
            <form id="addServiceForm">
                <div class="form-group">
                    <label for="serviceName">Name:</label>
                    <input type="text" id="serviceName" name="name" required>
                </div>
                <div class="form-group">
                    <label for="serviceUrl">URL:</label>
                    <input type="url" id="serviceUrl" name="url" required placeholder="https://example.com">
                </div>
                <button type="submit">Add service</button>
            </form>
        </div>
    </div>

    <script>
        const REFRESH_SECONDS = 10;
        let countdownTimer;
        let countdownValue = REFRESH_SECONDS;

        function escapeHtml(text) {
            const div = document.createElement('div');
            div.textContent = text;
            return div.innerHTML;
        }

        function tick() {
            countdownValue--;
            if (countdownValue <= 0) {
                countdownValue = REFRESH_SECONDS;
                loadServices();
            }
            document.getElementById('countdown').textContent = countdownValue;
        }

        function startCountdown() {
            countdownValue = REFRESH_SECONDS;
            document.getElementById('countdown').textContent = countdownValue;
            clearInterval(countdownTimer);
            countdownTimer = setInterval(tick, 1000);
        }

        function manualRefresh() {
            loadServices();
            startCountdown();
        }

        function loadServices() {
            fetch('/api/services')
                .then(response => response.json())
                .then(services => {
                    const serviceList = document.getElementById('serviceList');
                    if (services.length === 0) {
                        serviceList.innerHTML = '<p>No services added</p>';
                        return;
                    }
                    serviceList.innerHTML = services.map((service, index) =>
                        '<div class="service-item' + (service.status ? '' : ' offline') + '">' +
                            '<div class="service-info">' +
                                '<div class="status-light ' + (service.status ? 'status-online' : 'status-offline') + '"></div>' +
                                '<span class="service-name" title="' + escapeHtml(service.url) + '">' + escapeHtml(service.name) + '</span>' +
                            '</div>' +
                            '<button class="delete-btn" onclick="removeService(' + index + ')" title="Remove service">&times;</button>' +
                        '</div>'
                    ).join('');
                })
                .catch(error => {
                    console.error('Failed to load services:', error);
                    document.getElementById('serviceList').innerHTML = '<p>Failed to load services</p>';
                });
        }

        function postJson(path, body) {
            return fetch(path, {
                method: 'POST',
                headers: {'Content-Type': 'application/json'},
                body: JSON.stringify(body)
            }).then(response => response.json());
        }

        function removeService(index) {
            if (!confirm('Remove this service?')) {
                return;
            }
            postJson('/api/remove', {index: index})
                .then(result => {
                    if (result.success) {
                        loadServices();
                    } else {
                        alert('Failed to remove service: ' + result.error);
                    }
                })
                .catch(error => {
                    console.error('Error:', error);
                    alert('Failed to remove service');
                });
        }

        document.getElementById('addServiceForm').addEventListener('submit', function(e) {
            e.preventDefault();
            const formData = new FormData(e.target);
            postJson('/api/add', {name: formData.get('name'), url: formData.get('url')})
                .then(result => {
                    if (result.success) {
                        e.target.reset();
                        loadServices();
                    } else {
                        alert('Failed to add service: ' + result.error);
                    }
                })
                .catch(error => {
                    console.error('Error:', error);
                    alert('Failed to add service');
                });
        });

        loadServices();
        startCountdown();
    </script>
</body>
</html>
"""
